"""File-backed sequences for the CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator, Literal

from iterpack.inputs.exceptions import InputError

InputFormat = Literal["lines", "json"]

INPUT_FORMATS: tuple[str, ...] = ("lines", "json")


def open_lines(path: str | Path) -> Iterator[str]:
    """Yield the lines of a text file without their line endings.

    The file is read lazily and closed when the generator is exhausted or closed.
    """
    source = Path(path)
    if not source.is_file():
        raise InputError(f"input file not found: {source}")
    return _iter_lines(source)


def _iter_lines(source: Path) -> Iterator[str]:
    with source.open("r", encoding="utf-8", newline="") as handle:
        for line in handle:
            yield line.rstrip("\r\n")


def load_json_items(path: str | Path) -> Iterator[Any]:
    """Return an iterator over the items of a JSON array file."""
    source = Path(path)
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except FileNotFoundError as error:
        raise InputError(f"input file not found: {source}") from error
    except json.JSONDecodeError as error:
        raise InputError(f"invalid JSON ({source}): {error}") from error

    if not isinstance(payload, list):
        raise InputError(
            f"JSON input must be an array ({source}); got {type(payload).__name__}"
        )
    return (item for item in payload)


def open_source(path: str | Path, fmt: str = "lines") -> Iterator[Any]:
    if fmt == "lines":
        return open_lines(path)
    if fmt == "json":
        return load_json_items(path)
    raise InputError(
        f"Unsupported input format: {fmt}. Supported values: {', '.join(INPUT_FORMATS)}."
    )
