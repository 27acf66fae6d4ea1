"""Command line interface for symenum."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

from symenum.analyzer import analyze_generation, format_report
from symenum.backends import SwiftOptions, generate_swift
from symenum.config import GeneratorConfig, load_config
from symenum.errors import SymbolEnumError
from symenum.pipeline import GenerationResult, load_inputs, run_pipeline
from symenum.serialization import database_to_yaml

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="symenum",
        description="Generate a versioned Swift symbol enum from per-release symbol manifests.",
    )
    parser.add_argument("--loglevel",
                        dest="log_level",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=LOG_LEVELS,
                        default="WARNING")

    sub = parser.add_subparsers(dest="command", required=True)

    def add_input_arguments(p: argparse.ArgumentParser) -> None:
        p.add_argument("--config", help="Path to YAML config file.")
        p.add_argument("--input-dir", help="Directory holding the input files (overrides config).")

    generate = sub.add_parser("generate", help="Generate the Swift enum source.")
    add_input_arguments(generate)
    generate.add_argument("--output", help="Write Swift source to path (default: stdout).")
    generate.add_argument("--enum-name", help="Name of the generated enum (overrides config).")
    generate.add_argument("--dump-yaml", help="Also write derived cases and raw values as YAML.")
    generate.set_defaults(func=command_generate)

    report = sub.add_parser("report", help="Print a summary of the merged symbol data.")
    add_input_arguments(report)
    report.set_defaults(func=command_report)

    return parser


def _resolve_config(args: argparse.Namespace) -> GeneratorConfig:
    config = load_config(args.config) if args.config else GeneratorConfig()
    if args.input_dir:
        config.input_dir = args.input_dir
    if getattr(args, "enum_name", None):
        config.enum_name = args.enum_name
    return config


def _run(config: GeneratorConfig) -> GenerationResult:
    inputs = load_inputs(config)
    return run_pipeline(inputs)


def _warn_missing_previews(result: GenerationResult) -> None:
    if result.missing_previews:
        logger.warning("No symbol preview available for symbols %s", result.missing_previews)


def _write_outputs(outputs: List[Tuple[str, str]]) -> None:
    """Write every (path, content) pair, or none of them if one write fails."""
    written: List[str] = []
    try:
        for path, content in outputs:
            with open(path, "w", encoding="utf-8") as f:
                written.append(path)
                f.write(content)
            logger.info("Wrote %s", path)
    except OSError:
        for path in written:
            if os.path.isfile(path):
                os.remove(path)
        raise


def command_generate(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    result = _run(config)

    options = SwiftOptions(enum_name=config.enum_name, header=config.header, indent=config.indent)
    source = generate_swift(result.cases, result.raw_values, options=options)

    outputs = []
    if args.output:
        outputs.append((args.output, source + "\n"))
    if args.dump_yaml:
        outputs.append((args.dump_yaml, database_to_yaml(result.cases, result.raw_values)))

    _write_outputs(outputs)
    if not args.output:
        print(source)

    _warn_missing_previews(result)
    return 0


def command_report(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    result = _run(config)
    print(format_report(analyze_generation(result)))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level, logging.WARNING),
                        format="%(levelname)s: %(message)s")

    try:
        return args.func(args)
    except FileNotFoundError as e:
        logging.error("%s, aborting", e)
        return 1
    except SymbolEnumError as e:
        logging.error("%s, aborting", e)
        return 1
    except OSError as e:
        logging.error("IO error: %s, aborting", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
