"""Names needed to diff iterables: ``from iterdiff.prelude import *``."""

from iterpack.diff import Change, Diff, Insert, IterDiff, Keep, Remove, iter_diff

__all__ = [
    "Diff",
    "Keep",
    "Change",
    "Insert",
    "Remove",
    "IterDiff",
    "iter_diff",
]
