"""Loading element sequences from files and streams."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator, List, TextIO

import pandas as pd


def coerce_value(text: str) -> Any:
    """Turn a token into an int or float when it looks numeric."""
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        return float(stripped)
    except ValueError:
        return stripped


def iter_lines(handle: TextIO) -> Iterator[Any]:
    """Yield one coerced value per non-blank line, reading lazily."""
    for line in handle:
        if line.strip():
            yield coerce_value(line)


def load_values(path: str | Path, value_column: str | None = None) -> List[Any]:
    """Load values from a JSON list, JSONL, CSV, or plain text file."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".jsonl":
        values: list[Any] = []
        for line in path.read_text(encoding="utf-8").splitlines():
            if not line.strip():
                continue
            obj = json.loads(line)
            if isinstance(obj, dict):
                if value_column is None or value_column not in obj:
                    continue
                obj = obj[value_column]
            values.append(obj)
        return values
    if suffix == ".json":
        loaded = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(loaded, list):
            raise ValueError("JSON input file must contain a list")
        return loaded
    if suffix in {".csv", ".tsv"}:
        df = pd.read_csv(path, sep="\t" if suffix == ".tsv" else ",")
        if value_column is None:
            value_column = df.columns[0]
        if value_column not in df.columns:
            raise ValueError(f"Column '{value_column}' not found in {path}")
        return df[value_column].tolist()

    with path.open("r", encoding="utf-8") as handle:
        return list(iter_lines(handle))
