import pytest

from iterpack.diff import (
    Change,
    DiffEntry,
    Insert,
    Keep,
    Remove,
    diff_iterables,
    render_diff_line,
    render_diff_summary,
    render_first_divergence,
)


def test_identical_inputs_have_no_divergence() -> None:
    result = diff_iterables([1, 2, 3], [1, 2, 3])

    assert result.identical is True
    assert result.first_divergence is None
    assert result.complete is True
    assert result.summary() == {"keep": 3, "change": 0, "insert": 0, "remove": 0}
    assert [entry.index for entry in result.entries] == [1, 2, 3]


def test_first_divergence_and_counts() -> None:
    result = diff_iterables([0, 1, 2, 3], [0, 2, 2])

    assert result.identical is False
    assert result.first_divergence == DiffEntry(index=2, diff=Change(2))
    assert result.summary() == {"keep": 2, "change": 1, "insert": 0, "remove": 1}
    assert result.total == 4


def test_stop_at_first_divergence_limits_entries() -> None:
    result = diff_iterables([0, 1, 2, 3], [0, 9, 9, 9], stop_at_first_divergence=True)

    assert [entry.diff for entry in result.entries] == [Keep(), Change(9)]
    assert result.complete is False
    assert result.total == 2


def test_stop_at_first_divergence_without_divergence_is_complete() -> None:
    result = diff_iterables("ab", "ab", stop_at_first_divergence=True)

    assert result.complete is True
    assert result.total == 2


def test_changes_only_still_counts_keeps() -> None:
    result = diff_iterables(["a", "b", "c"], ["a", "x"], include_keeps=False)

    assert result.entries == [
        DiffEntry(index=2, diff=Change("x")),
        DiffEntry(index=3, diff=Remove()),
    ]
    assert result.summary()["keep"] == 1


def test_first_divergence_is_recorded_while_diffing() -> None:
    result = diff_iterables(["a", "b", "c"], ["a", "x", "y"])

    assert result.first_divergence is result.entries[1]

    changes_only = diff_iterables(["a", "b", "c"], ["a", "x", "y"], include_keeps=False)

    assert changes_only.first_divergence is changes_only.entries[0]
    assert changes_only.first_divergence == DiffEntry(index=2, diff=Change("x"))

    stopped = diff_iterables([1, 2], [1, 2, 3], stop_at_first_divergence=True)

    assert stopped.first_divergence is stopped.entries[-1]
    assert stopped.first_divergence == DiffEntry(index=3, diff=Insert(3))


def test_to_dict_payload() -> None:
    result = diff_iterables([1], [1, 2], left_label="old", right_label="new")

    assert result.to_dict() == {
        "left_label": "old",
        "right_label": "new",
        "identical": False,
        "complete": True,
        "total": 2,
        "summary": {"keep": 1, "change": 0, "insert": 1, "remove": 0},
        "first_divergence": {"index": 2, "kind": "insert", "value": 2},
        "entries": [
            {"index": 1, "kind": "keep"},
            {"index": 2, "kind": "insert", "value": 2},
        ],
    }


def test_errors_from_inputs_propagate() -> None:
    def broken():
        yield "a"
        raise ValueError("bad record")

    with pytest.raises(ValueError, match="bad record"):
        diff_iterables(["a", "b"], broken())


def test_render_diff_line_markers() -> None:
    assert render_diff_line(DiffEntry(1, Keep())) == "   1 ="
    assert render_diff_line(DiffEntry(2, Change("x"))) == "   2 ~ 'x'"
    assert render_diff_line(DiffEntry(3, Insert(7))) == "   3 + 7"
    assert render_diff_line(DiffEntry(12, Remove())) == "  12 -"


def test_render_summary_and_first_divergence() -> None:
    result = diff_iterables(["a"], ["a", "b"], left_label="L", right_label="R")

    assert render_diff_summary(result) == "left=L right=R keep=1 change=0 insert=1 remove=0"
    assert render_first_divergence(result) == (
        "first divergence: position 2 (insert)\n   2 + 'b'"
    )


def test_render_first_divergence_for_identical_inputs() -> None:
    assert render_first_divergence(diff_iterables([], [])) == "no divergence detected"
