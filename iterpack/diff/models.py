"""Edit operation values produced by the positional diff engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Literal, TypeVar

T = TypeVar("T")

DiffKind = Literal["keep", "change", "insert", "remove"]

DIFF_KINDS: tuple[str, ...] = ("keep", "change", "insert", "remove")

# Sort order of the variants; payloads break ties within a variant.
VARIANT_ORDER: tuple[str, ...] = ("change", "remove", "keep", "insert")


class Diff(Generic[T]):
    """One edit operation turning the left element at a position into the right one.

    Variants are ``Keep``, ``Change``, ``Insert`` and ``Remove``. ``Change`` and
    ``Insert`` carry the right-hand element itself; it is not copied.

    Values are totally ordered when their payloads are: every ``Change`` sorts
    before every ``Remove``, then ``Keep``, then ``Insert``, and two values of
    the same variant compare by payload.
    """

    __slots__ = ()

    kind: ClassVar[DiffKind]

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind}

    def _sort_key(self) -> tuple[Any, ...]:
        return (VARIANT_ORDER.index(self.kind),)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Diff):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Diff):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Diff):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Diff):
            return NotImplemented
        return self._sort_key() >= other._sort_key()


@dataclass(frozen=True, slots=True)
class Keep(Diff[Any]):
    """Both sides hold equal elements at this position."""

    kind: ClassVar[DiffKind] = "keep"


@dataclass(frozen=True, slots=True)
class Change(Diff[T]):
    """The elements differ; ``value`` is the element from the right side."""

    value: T
    kind: ClassVar[DiffKind] = "change"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "value": self.value}

    def _sort_key(self) -> tuple[Any, ...]:
        return (VARIANT_ORDER.index(self.kind), self.value)


@dataclass(frozen=True, slots=True)
class Insert(Diff[T]):
    """The position exists only on the right side."""

    value: T
    kind: ClassVar[DiffKind] = "insert"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "value": self.value}

    def _sort_key(self) -> tuple[Any, ...]:
        return (VARIANT_ORDER.index(self.kind), self.value)


@dataclass(frozen=True, slots=True)
class Remove(Diff[Any]):
    """The position exists only on the left side."""

    kind: ClassVar[DiffKind] = "remove"
