"""
Generator configuration, optionally loaded from a YAML file.

Example config.yaml:

    input_dir: Resources
    enum_name: SFSymbol
    files:
        manifest: name_availability.plist
        previews: symbol_previews.txt

Every key is optional; unknown keys are rejected.
"""

import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

import yaml

from symenum.errors import ConfigError


DEFAULT_FILES: Dict[str, str] = {
    "manifest": "name_availability.plist",
    "aliases": "name_aliases_strings.txt",
    "legacy_aliases": "legacy_aliases_strings.txt",
    "as_is_symbols": "as_is_symbols.txt",
    "localization_suffixes": "localization_suffixes.txt",
    "names": "symbol_names.txt",
    "previews": "symbol_previews.txt",
}

DEFAULT_HEADER = "// Don't touch this manually, this code is generated by the SymbolEnumCreator helper tool"


@dataclass
class GeneratorConfig:
    """
    Settings for one generation run.

    Properties:
        input_dir: Directory holding the input files
        files: Input role -> file name (relative to input_dir, or absolute)
        enum_name: Name of the generated Swift enum
        header: Comment line placed at the top of the generated file
        indent: Indentation unit of the generated code
    """

    input_dir: str = "."
    files: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_FILES))
    enum_name: str = "SFSymbol"
    header: str = DEFAULT_HEADER
    indent: str = "    "

    def path_for(self, role: str) -> str:
        """Resolve the path of an input file by its role."""
        if role not in self.files:
            raise ConfigError(f"Unknown input file role: {role}")
        return os.path.join(self.input_dir, self.files[role])


def config_from_dict(d: Optional[Dict[str, Any]]) -> GeneratorConfig:
    """
    Build a GeneratorConfig from a plain dict, filling in defaults.

    Raises:
        ConfigError: On unknown keys, unknown file roles or wrong value types
    """
    if d is None:
        return GeneratorConfig()
    if not isinstance(d, dict):
        raise ConfigError("Configuration root must be a mapping")

    known = {f.name for f in fields(GeneratorConfig)}
    unknown = sorted(set(d) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {unknown}")

    config = GeneratorConfig()

    files = d.get("files") or {}
    if not isinstance(files, dict):
        raise ConfigError("'files' must be a mapping of role to file name")
    unknown_roles = sorted(set(files) - set(DEFAULT_FILES))
    if unknown_roles:
        raise ConfigError(f"Unknown input file roles: {unknown_roles}")
    config.files.update({role: str(name) for role, name in files.items()})

    for key in ("input_dir", "enum_name", "header", "indent"):
        if key in d:
            value = d[key]
            if not isinstance(value, str):
                raise ConfigError(f"'{key}' must be a string")
            setattr(config, key, value)

    return config


def load_config(filepath: str) -> GeneratorConfig:
    """
    Load a YAML configuration file.

    A relative input_dir is resolved against the config file's directory.
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {filepath}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {filepath}: {str(e)}")

    config = config_from_dict(data)
    if not os.path.isabs(config.input_dir):
        config.input_dir = os.path.join(os.path.dirname(os.path.abspath(filepath)), config.input_dir)
    return config
