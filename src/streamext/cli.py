"""Command line interface for stream-extensions."""

from __future__ import annotations

import argparse
import itertools
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Sequence

from pydantic import ValidationError

from . import __version__
from .config import PartitionSettings, load_partition_config, validate_config_file
from .features import summarize_group
from .ingest import coerce_value, iter_lines, load_values
from .logging_utils import configure_logging, log_event
from .partition import InvalidArgument, sliding_window
from .sequences import int_range

logger = logging.getLogger(__name__)


def _print_result(result: Any, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result, indent=2))
    else:
        print(result)


def _read_input(source: str, value_column: str | None) -> Iterable[Any]:
    if source == "-":
        return iter_lines(sys.stdin)
    return load_values(Path(source), value_column=value_column)


def _resolve_settings(args: argparse.Namespace) -> PartitionSettings:
    data: dict[str, Any] = load_partition_config(args.config).model_dump() if args.config else {}
    overrides = {"size": args.size, "step": args.step, "pad": args.pad, "limit": args.limit}
    data.update({k: v for k, v in overrides.items() if v is not None})
    if "size" not in data:
        raise SystemExit("Specify --size or a --config file that sets 'size'.")
    return PartitionSettings.model_validate(data)


def _emit_groups(groups: Iterator[List[Any]], args: argparse.Namespace) -> int:
    rows: list[Any] = []
    count = 0
    for group in groups:
        count += 1
        row: Any = {"group": group, "stats": summarize_group(group)} if args.stats else group
        if args.json:
            rows.append(row)
        elif args.stats:
            print(f"{' '.join(str(x) for x in group)}\t{json.dumps(row['stats'])}")
        else:
            print(" ".join(str(x) for x in group))
    if args.json:
        _print_result(rows, as_json=True)
    return count


def _add_input_arguments(sub: argparse.ArgumentParser) -> None:
    sub.add_argument("input", help="Input file (.json, .jsonl, .csv, text) or '-' for stdin")
    sub.add_argument("--value-column", type=str, help="Column/key holding values in CSV or JSONL inputs")
    sub.add_argument("--limit", type=int, help="Stop after this many groups")
    sub.add_argument("--stats", action="store_true", help="Attach numeric summary statistics to each group")
    sub.add_argument("--json", action="store_true", help="Emit groups as JSON")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="streamext",
        description="Partition sequences into fixed-size groups and sliding windows.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--json-logs", action="store_true", default=None, help="Emit JSON logs (default: $STREAMEXT_JSON_LOGS)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    part = subparsers.add_parser("partition", help="Split an input sequence into groups")
    _add_input_arguments(part)
    part.add_argument("--size", type=int, help="Number of elements per group")
    part.add_argument("--step", type=int, help="Distance between group starts (default: size)")
    part.add_argument(
        "--pad",
        nargs="*",
        type=coerce_value,
        help="Values completing a short trailing group (no values: keep it short)",
    )
    part.add_argument("--config", type=Path, help="YAML/JSON file with partition settings")

    window = subparsers.add_parser("window", help="Sliding window over an input sequence")
    _add_input_arguments(window)
    window.add_argument("--size", type=int, required=True, help="Window length")

    rng = subparsers.add_parser("range", help="Print an integer sequence")
    rng.add_argument("--start", type=int, default=0)
    rng.add_argument("--end", type=int, help="Exclusive end (omit for an unbounded sequence)")
    rng.add_argument("--step", type=int, default=1)
    rng.add_argument("--limit", type=int, help="Stop after this many values")
    rng.add_argument("--json", action="store_true", help="Emit values as a JSON list")

    validate = subparsers.add_parser("validate", help="Validate a partition configuration file")
    validate.add_argument("config", type=Path, help="Path to configuration file")
    validate.add_argument("--json", action="store_true", help="Emit validation result as JSON")

    subparsers.add_parser("version", help="Display the installed version")

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, json_logs=args.json_logs)

    try:
        if args.command == "partition":
            settings = _resolve_settings(args)
            values = _read_input(args.input, args.value_column)
            groups: Iterator[List[Any]] = settings.build(values)
            if settings.limit is not None:
                groups = itertools.islice(groups, settings.limit)
            count = _emit_groups(groups, args)
            log_event(logger, "partition", size=settings.size, step=settings.step, groups=count)
        elif args.command == "window":
            groups = sliding_window(_read_input(args.input, args.value_column), args.size)
            if args.limit is not None:
                groups = itertools.islice(groups, args.limit)
            count = _emit_groups(groups, args)
            log_event(logger, "window", size=args.size, groups=count)
        elif args.command == "range":
            if args.end is None and args.limit is None:
                raise SystemExit("Specify --end or --limit for an unbounded range.")
            values_iter = int_range(args.start, args.end, args.step)
            if args.limit is not None:
                values_iter = itertools.islice(values_iter, args.limit)
            if args.json:
                _print_result(list(values_iter), as_json=True)
            else:
                for value in values_iter:
                    print(value)
        elif args.command == "validate":
            result = validate_config_file(args.config)
            _print_result(result.as_dict(), as_json=args.json)
            if not result.ok:
                raise SystemExit(1)
        elif args.command == "version":
            print(__version__)
    except (InvalidArgument, ValidationError, FileNotFoundError, ValueError) as exc:
        raise SystemExit(f"{args.command}: {exc}") from exc


if __name__ == "__main__":
    main()
