"""shortids command line interface."""

from __future__ import annotations

import argparse
import json
from typing import Any

from .config import GeneratorConfig, load_config
from .exceptions import InvalidArgumentError, ShortIdsError
from .generator import Generator
from .logging_utils import get_logger
from .shrinker import shrink


def _print_output(payload: dict[str, Any], *, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, sort_keys=True))
        return

    if "result" in payload:
        print(payload["result"])
    for identifier in payload.get("ids", []):
        print(identifier)

    errors = payload.get("errors")
    if isinstance(errors, list) and errors:
        print("errors:")
        for item in errors:
            print(f"  - {item.get('error_type', '<unknown>')}: {item.get('message', '')}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shortids")
    parser.add_argument("--log-level", help="Logging level (defaults to $SHORTIDS_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    shrink_parser = subparsers.add_parser("shrink", help="Shrink a string")
    shrink_parser.add_argument("value", help="String to shrink")
    shrink_parser.add_argument(
        "--max-length", type=int, default=0, help="Maximum output length (0 for no limit)"
    )
    shrink_parser.add_argument(
        "--preserve-casing", action="store_true", help="Keep casing instead of camel case"
    )
    shrink_parser.add_argument("--json", action="store_true", help="Emit JSON output")

    generate_parser = subparsers.add_parser("generate", help="Generate unique identifiers")
    source = generate_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--kind", help="Kind name the prefix is derived from")
    source.add_argument("--prefix", help="Literal prefix")
    generate_parser.add_argument("--id", dest="item_id", help="Optional base id")
    generate_parser.add_argument(
        "--suffix", dest="suffixes", action="append", default=[], help="Suffix (repeatable)"
    )
    generate_parser.add_argument(
        "--count", type=int, default=1, help="Number of identifiers to generate"
    )
    generate_parser.add_argument("--config", help="Optional generator config JSON path")
    generate_parser.add_argument("--delimiter", help="Override the configured delimiter")
    generate_parser.add_argument(
        "--prefix-max-length", type=int, help="Override the configured prefix length"
    )
    generate_parser.add_argument(
        "--avoid-camel-cases", action="store_true", help="Lowercase kind prefixes"
    )
    generate_parser.add_argument("--json", action="store_true", help="Emit JSON output")

    return parser


def _generator_from_args(args: argparse.Namespace) -> Generator:
    config = load_config(args.config) if args.config else GeneratorConfig()
    options = config.to_dict()
    if args.delimiter is not None:
        options["delimiter"] = args.delimiter
    if args.prefix_max_length is not None:
        options["prefix_max_length"] = args.prefix_max_length
    if args.avoid_camel_cases:
        options["avoid_camel_cases"] = True
    return Generator.from_config(GeneratorConfig.from_dict(options))


def _run(args: argparse.Namespace) -> int:
    if args.command == "shrink":
        result = shrink(args.value, args.max_length, preserve_casing=bool(args.preserve_casing))
        _print_output({"ok": True, "result": result}, as_json=bool(args.json))
        return 0

    if args.command == "generate":
        if args.count < 1:
            raise InvalidArgumentError("count", "count must be at least 1.", value=args.count)
        generator = _generator_from_args(args)
        if args.kind is not None:
            ids = [
                generator.generate_typed(args.kind, args.item_id, *args.suffixes)
                for _ in range(args.count)
            ]
        else:
            ids = [
                generator.generate_custom(args.prefix, args.item_id, *args.suffixes)
                for _ in range(args.count)
            ]
        _print_output({"ok": True, "ids": ids}, as_json=bool(args.json))
        return 0

    raise InvalidArgumentError("command", f"Unsupported command: {args.command}", value=args.command)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    get_logger(level=args.log_level)
    try:
        return _run(args)
    except ShortIdsError as exc:
        payload = {"ok": False, "errors": [exc.to_dict()]}
        _print_output(payload, as_json=bool(getattr(args, "json", False)))
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
