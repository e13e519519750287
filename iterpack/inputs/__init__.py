"""Input sources that feed files into the diff engine."""

from iterpack.inputs.exceptions import InputError
from iterpack.inputs.sources import (
    INPUT_FORMATS,
    InputFormat,
    load_json_items,
    open_lines,
    open_source,
)

__all__ = [
    "InputError",
    "InputFormat",
    "INPUT_FORMATS",
    "open_lines",
    "load_json_items",
    "open_source",
]
