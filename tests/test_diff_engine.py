from itertools import count, islice
from typing import Any, Iterable, Iterator

import pytest

from iterpack.diff import Change, DiffIter, Insert, Keep, Remove, iter_diff


class CountingIterator:
    """Iterator wrapper that records how many times ``next`` was called."""

    def __init__(self, items: Iterable[Any]) -> None:
        self._items = iter(items)
        self.pulls = 0
        self.yielded = 0

    def __iter__(self) -> "CountingIterator":
        return self

    def __next__(self) -> Any:
        self.pulls += 1
        item = next(self._items)
        self.yielded += 1
        return item


class ResumingIterator:
    """Misbehaving iterator that yields again after signalling exhaustion."""

    def __init__(self) -> None:
        self._calls = 0

    def __iter__(self) -> "ResumingIterator":
        return self

    def __next__(self) -> int:
        self._calls += 1
        if self._calls == 1:
            raise StopIteration
        return self._calls


def test_canonical_example() -> None:
    assert list(iter_diff([0, 1, 2, 3], [0, 2, 2])) == [Keep(), Change(2), Keep(), Remove()]


def test_right_longer_ends_with_inserts() -> None:
    diffs = list(iter_diff([0, 1, 2], [0, 3, 2, 3]))

    assert diffs == [Keep(), Change(3), Keep(), Insert(3)]


def test_left_longer_ends_with_removes() -> None:
    diffs = list(iter_diff([0, 1, 2, 4], [0, 2]))

    assert diffs == [Keep(), Change(2), Remove(), Remove()]


def test_shifted_elements_are_reported_as_changes_not_moves() -> None:
    diffs = list(iter_diff([0, 2], [0, 1, 2, 4]))

    assert diffs == [Keep(), Change(1), Insert(2), Insert(4)]


def test_multiple_changes() -> None:
    diffs = list(iter_diff([0, 1, 2, 3], [0, 3, 1, 3]))

    assert diffs == [Keep(), Change(3), Change(1), Keep()]


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ([], [], []),
        ([], [1, 2], [Insert(1), Insert(2)]),
        ([1, 2], [], [Remove(), Remove()]),
        ([1, 2, 3], [1, 2, 3], [Keep(), Keep(), Keep()]),
    ],
)
def test_boundary_scenarios(left: list, right: list, expected: list) -> None:
    assert list(iter_diff(left, right)) == expected


def test_mixed_element_types_use_left_equality() -> None:
    class Wrapped:
        def __init__(self, value: int) -> None:
            self.value = value

        def __eq__(self, other: object) -> bool:
            return self.value == other

    diffs = list(iter_diff([Wrapped(0), Wrapped(2)], [0, 1, 2, 4]))

    assert diffs == [Keep(), Change(1), Insert(2), Insert(4)]


def test_strings_are_diffed_character_by_character() -> None:
    assert list(iter_diff("cat", "cut")) == [Keep(), Change("u"), Keep()]


def test_accepts_generators_and_consumes_each_element_once() -> None:
    left = CountingIterator(range(5))
    right = CountingIterator(x if x != 3 else -1 for x in range(4))

    diffs = list(iter_diff(left, right))

    assert diffs == [Keep(), Keep(), Keep(), Change(-1), Remove()]
    assert left.yielded == 5
    assert right.yielded == 4


def test_pulling_k_values_pulls_at_most_k_elements_per_side() -> None:
    left = CountingIterator(range(100))
    right = CountingIterator(range(100))

    first_three = list(islice(iter_diff(left, right), 3))

    assert first_three == [Keep(), Keep(), Keep()]
    assert left.pulls == 3
    assert right.pulls == 3


def test_exhausted_side_is_never_pulled_again() -> None:
    left = CountingIterator([1])
    right = CountingIterator([1, 2, 3, 4])

    diffs = list(iter_diff(left, right))

    assert diffs == [Keep(), Insert(2), Insert(3), Insert(4)]
    # one element plus a single exhaustion probe
    assert left.pulls == 2


def test_exhaustion_is_monotonic_for_misbehaving_iterators() -> None:
    diffs = list(iter_diff(ResumingIterator(), ["a", "b"]))

    assert diffs == [Insert("a"), Insert("b")]


def test_state_tracks_exhaustion_flags() -> None:
    diff_iter = iter_diff([1, 2, 3], [1])
    assert diff_iter.state == "both"

    assert next(diff_iter) == Keep()
    assert diff_iter.state == "both"

    assert next(diff_iter) == Remove()
    assert diff_iter.state == "left_only"

    assert list(diff_iter) == [Remove()]
    assert diff_iter.state == "done"


def test_state_right_only_when_left_runs_out_first() -> None:
    diff_iter = iter_diff([], ["x"])

    assert next(diff_iter) == Insert("x")
    assert diff_iter.state == "right_only"


def test_done_is_terminal() -> None:
    diff_iter = iter_diff([1], [2])

    assert list(diff_iter) == [Change(2)]
    with pytest.raises(StopIteration):
        next(diff_iter)
    assert list(diff_iter) == []
    assert diff_iter.state == "done"


def test_iterator_is_single_pass() -> None:
    diff_iter = iter_diff([1, 2], [1, 3])

    assert iter(diff_iter) is diff_iter
    assert list(diff_iter) == [Keep(), Change(3)]
    assert list(diff_iter) == []


def test_infinite_inputs_produce_an_unbounded_lazy_stream() -> None:
    evens = (n * 2 for n in count())

    diffs = list(islice(iter_diff(count(), evens), 4))

    assert diffs == [Keep(), Change(2), Change(4), Change(6)]


def test_infinite_right_side_after_finite_left_yields_inserts() -> None:
    diffs = list(islice(iter_diff([0], count()), 3))

    assert diffs == [Keep(), Insert(1), Insert(2)]


def test_underlying_errors_propagate_unchanged() -> None:
    def failing() -> Iterator[int]:
        yield 1
        raise OSError("disk gone")

    diff_iter = iter_diff([1, 2], failing())

    assert next(diff_iter) == Keep()
    with pytest.raises(OSError, match="disk gone"):
        next(diff_iter)


def test_direct_construction_matches_iter_diff() -> None:
    assert list(DiffIter([1, 2], [1])) == list(iter_diff([1, 2], [1]))
    assert repr(DiffIter([], [])) == "DiffIter(state=both)"
