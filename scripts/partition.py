"""CLI wrapper to partition a sample file into groups."""

from __future__ import annotations

import argparse
from pathlib import Path

from streamext import load_partition_config
from streamext.ingest import load_values


def main() -> None:
    parser = argparse.ArgumentParser(description="Partition a sample file using a YAML/JSON settings file")
    parser.add_argument("input", type=Path, help="Input file (.json, .jsonl, .csv or text)")
    parser.add_argument("config", type=Path, help="Partition settings (size, step, pad, limit)")
    args = parser.parse_args()

    settings = load_partition_config(args.config)
    for index, group in enumerate(settings.build(load_values(args.input))):
        if settings.limit is not None and index >= settings.limit:
            break
        print(group)


if __name__ == "__main__":
    main()
