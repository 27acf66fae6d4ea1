"""Conversion of dotted symbol names into Swift enum case identifiers."""

import re

# Swift keywords that can collide with a symbol name component
SWIFT_KEYWORDS = frozenset({
    "associatedtype", "break", "case", "catch", "class", "continue", "default",
    "defer", "deinit", "do", "else", "enum", "extension", "fallthrough", "false",
    "fileprivate", "for", "func", "guard", "if", "import", "in", "init", "inout",
    "internal", "is", "let", "nil", "open", "operator", "private", "protocol",
    "public", "repeat", "rethrows", "return", "self", "static", "struct",
    "subscript", "super", "switch", "throw", "throws", "true", "try", "typealias",
    "var", "where", "while",
})

_SEPARATOR_RE = re.compile(r"[.\-\s]+")


def to_case_name(name: str) -> str:
    """
    Convert a symbol name into a Swift case identifier.

    Examples:
        "square.and.arrow.up" -> "squareAndArrowUp"
        "0.circle"            -> "_0Circle"
        "return"              -> "`return`"
    """
    parts = [part for part in _SEPARATOR_RE.split(name) if part]
    if not parts:
        raise ValueError(f"Cannot derive a case name from {name!r}")

    identifier = parts[0] + "".join(part[0].upper() + part[1:] for part in parts[1:])

    if identifier[0].isdigit():
        return "_" + identifier
    if identifier in SWIFT_KEYWORDS:
        return f"`{identifier}`"
    return identifier
