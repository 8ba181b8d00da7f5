"""Arithmetic shared by page and element ordering.

Pages are ordered within a template and elements within a page. Both scopes
only ever move through three transitions: append at ``N + 1``, remove and
compact, or swap with the adjacent sibling.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from app.domain.exceptions import SequenceIntegrityError

Direction = Literal["up", "down"]
ItemKind = Literal["page", "element"]

DIRECTIONS: frozenset[str] = frozenset({"up", "down"})
ITEM_KINDS: frozenset[str] = frozenset({"page", "element"})


def next_sequence(current_max: int | None) -> int:
    """Return the sequence an appended item receives."""

    return (current_max or 0) + 1


def neighbour_sequence(sequence: int, direction: str) -> int:
    """Return the sequence of the sibling an item swaps with."""

    if direction not in DIRECTIONS:
        raise ValueError(f"Dirección no válida: {direction!r}")
    return sequence - 1 if direction == "up" else sequence + 1


def ensure_item_kind(kind: str) -> str:
    if kind not in ITEM_KINDS:
        raise ValueError(f"Tipo de elemento a mover no válido: {kind!r}")
    return kind


def is_dense(sequences: Iterable[int]) -> bool:
    values = sorted(sequences)
    return values == list(range(1, len(values) + 1))


def ensure_dense(scope: str, scope_id: int, sequences: Iterable[int]) -> None:
    """Raise :class:`SequenceIntegrityError` unless ``sequences`` is ``1..N``."""

    values = sorted(sequences)
    if not is_dense(values):
        raise SequenceIntegrityError(scope, scope_id, values)


__all__ = [
    "DIRECTIONS",
    "Direction",
    "ITEM_KINDS",
    "ItemKind",
    "ensure_dense",
    "ensure_item_kind",
    "is_dense",
    "neighbour_sequence",
    "next_sequence",
]
