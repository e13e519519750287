"""Input source exceptions."""


class InputError(Exception):
    """Raised when an input file cannot be turned into a sequence."""
