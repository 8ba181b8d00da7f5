"""Unit tests for the ordering arithmetic."""

import pytest

from app.domain.exceptions import SequenceIntegrityError
from app.domain.sequencing import (
    ensure_dense,
    ensure_item_kind,
    is_dense,
    neighbour_sequence,
    next_sequence,
)


def test_next_sequence_starts_at_one_and_follows_the_maximum():
    assert next_sequence(None) == 1
    assert next_sequence(0) == 1
    assert next_sequence(4) == 5


def test_neighbour_sequence_by_direction():
    assert neighbour_sequence(3, "up") == 2
    assert neighbour_sequence(3, "down") == 4


def test_neighbour_sequence_rejects_unknown_direction():
    with pytest.raises(ValueError):
        neighbour_sequence(1, "left")


def test_ensure_item_kind_rejects_unknown_kind():
    assert ensure_item_kind("page") == "page"
    with pytest.raises(ValueError):
        ensure_item_kind("template")


@pytest.mark.parametrize(
    ("sequences", "expected"),
    [
        ([], True),
        ([1], True),
        ([3, 1, 2], True),
        ([1, 3], False),
        ([1, 1, 2], False),
        ([0, 1], False),
    ],
)
def test_is_dense(sequences, expected):
    assert is_dense(sequences) is expected


def test_ensure_dense_reports_scope_and_values():
    with pytest.raises(SequenceIntegrityError) as exc:
        ensure_dense("plantilla", 7, [2, 1, 4])

    assert exc.value.scope_id == 7
    assert exc.value.sequences == [1, 2, 4]
