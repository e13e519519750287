"""Diff subsystem exceptions."""


class DiffError(Exception):
    """Base class for diff subsystem errors."""


class PatchError(DiffError):
    """Raised when a diff stream does not fit the sequence it is applied to."""
