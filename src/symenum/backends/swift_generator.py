"""
Swift enum generator for derived symbol cases.

Converts enum cases and the raw value table into the source of a Swift
String-backed enum:
    - one documented, availability-annotated case per EnumCase
    - an allCases property returning the cases valid on the running OS,
      one `if #available` branch per availability (newest first)
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set

from symenum.config import DEFAULT_HEADER
from symenum.model import PLATFORMS, Availability, EnumCase, RawValueRow
from symenum.raw_values import rows_by_availability


@dataclass
class SwiftOptions:
    """Output settings for the generated enum."""
    enum_name: str = "SFSymbol"
    header: str = DEFAULT_HEADER
    indent: str = "    "


def _escape_swift_string(s: str) -> str:
    return s.replace("\\", "\\\\").replace('"', '\\"')


def _availability_list(availability: Availability) -> str:
    """iOS 13.0, macOS 10.15, tvOS 13.0, watchOS 6.0, *"""
    parts = [f"{platform} {version}" for platform, version in availability.versions().items()]
    return ", ".join(parts) + ", *"


def _localization_docs(localizations: Dict[Availability, Set[str]]) -> List[str]:
    """One doc line per epoch that adds localizations, oldest first."""
    lines = []
    handled: Set[str] = set()
    for availability in sorted(localizations):
        new = localizations[availability] - handled
        if not new:
            continue
        handled |= new
        v = availability.versions()
        lines.append(
            f"/// From iOS {v['iOS']}, macOS {v['macOS']}, tvOS {v['tvOS']} and watchOS {v['watchOS']} on, "
            f"the following localizations are available: {', '.join(sorted(new))}"
        )
    return lines


def generate_case(case: EnumCase, indent: str = "    ") -> str:
    """Generate the documented declaration of a single enum case."""
    lines = [f"/// {case.preview or 'No preview available.'}"]
    lines.extend(_localization_docs(case.localizations))

    if case.restriction:
        lines.append(f"/// ⚠️ This symbol can refer only to Apple's {case.restriction}.")

    if case.deprecation is not None:
        introduced = case.introduced.versions()
        deprecated = case.deprecation.at.versions()
        for platform in PLATFORMS:
            lines.append(
                f"@available({platform}, introduced: {introduced[platform]}, "
                f"deprecated: {deprecated[platform]}, renamed: \"{case.deprecation.renamed_to}\")"
            )
    else:
        lines.append(f"@available({_availability_list(case.introduced)})")

    lines.append(f'case {case.case_name} = "{_escape_swift_string(case.name)}"')
    return "\n".join(indent + line for line in lines)


def generate_all_cases(raw_values: Sequence[RawValueRow], enum_name: str = "SFSymbol",
                       indent: str = "    ") -> str:
    """
    Generate the allCases property.

    The oldest availability is the unguarded fallback branch; every newer
    availability gets its own `if #available` branch, newest first.
    """
    i1, i2, i3, i4 = indent, indent * 2, indent * 3, indent * 4
    grouped = rows_by_availability(raw_values)
    lines = [f"{i1}public static var allCases: [{enum_name}] {{"]

    if not grouped:
        lines.append(f"{i2}return []")
        lines.append(f"{i1}}}")
        return "\n".join(lines)

    availabilities = sorted(grouped, reverse=True)
    if len(availabilities) == 1:
        items = [f"{i3}.{row.case_name}" for row in grouped[availabilities[0]]]
        lines.append(f"{i2}return [")
        lines.append(",\n".join(items))
        lines.append(f"{i2}]")
        lines.append(f"{i1}}}")
        return "\n".join(lines)

    for index, availability in enumerate(availabilities):
        if index == 0:
            lines.append(f"{i2}if #available({_availability_list(availability)}) {{")
        elif index < len(availabilities) - 1:
            lines.append(f"{i2}}} else if #available({_availability_list(availability)}) {{")
        else:
            lines.append(f"{i2}}} else {{")
        lines.append(f"{i3}return [")
        lines.append(",\n".join(f"{i4}.{row.case_name}" for row in grouped[availability]))
        lines.append(f"{i3}]")

    lines.append(f"{i2}}}")
    lines.append(f"{i1}}}")
    return "\n".join(lines)


def generate_swift(
    cases: Sequence[EnumCase],
    raw_values: Sequence[RawValueRow],
    options: Optional[SwiftOptions] = None,
) -> str:
    """
    Generate the complete Swift source of the symbol enum.

    Args:
        cases: Enum cases, in output order
        raw_values: Validated raw value table
        options: Enum name, header and indentation

    Returns:
        String containing the Swift source
    """
    options = options or SwiftOptions()

    availabilities = sorted({row.availability for row in raw_values})
    enum_availability = ""
    if availabilities:
        enum_availability = f"@available({_availability_list(availabilities[0])})\n"

    body = "\n\n".join(generate_case(case, options.indent) for case in cases)
    all_cases = generate_all_cases(raw_values, options.enum_name, options.indent)

    parts = [
        f"{options.header}\n\n",
        enum_availability,
        f"public enum {options.enum_name}: String, CaseIterable {{\n",
    ]
    if body:
        parts.append(body + "\n\n")
    parts.append(all_cases + "\n}")
    return "".join(parts)


def save_swift_file(cases: Sequence[EnumCase], raw_values: Sequence[RawValueRow], filename: str,
                    options: Optional[SwiftOptions] = None) -> None:
    """
    Generate the Swift source and save it to file.

    Args:
        cases: Enum cases, in output order
        raw_values: Validated raw value table
        filename: Output file path (.swift extension recommended)
        options: Enum name, header and indentation
    """
    source = generate_swift(cases, raw_values, options=options)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(source + "\n")


__all__ = ["SwiftOptions", "generate_case", "generate_all_cases", "generate_swift", "save_swift_file"]
