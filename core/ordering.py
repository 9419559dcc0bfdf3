# =============================================================================
# core/ordering.py - Ordered List Logic
# =============================================================================
# Pure functions for lists whose order is stored in a `sequence_order` field:
# - move_item: swap one entry with its neighbour (one step up or down)
# - next_sequence_index: position for a newly created entry
#
# Nothing here talks to the record store. Callers persist the IndexChange
# records that move_item returns.
#
# Usage:
#   reordered, changes = move_item(looks, index=2, direction=MoveDirection.UP)
#   for change in changes:
#       SupabaseClient.update_row("looks", change.record_id,
#                                 {"sequence_order": change.sequence_order})
# =============================================================================

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Sequence, TypeVar

T = TypeVar("T")


class MoveDirection(str, Enum):
    """Direction of a one-step move in an ordered list."""
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class IndexChange:
    """
    A sequence_order value that must be written back.

    previous_order is kept so a failed multi-write can be reverted.
    """
    record_id: str
    sequence_order: int
    previous_order: int


def _get(item: Any, field: str) -> Any:
    """Read a field from a model/dataclass or a plain row dict."""
    if isinstance(item, dict):
        return item[field]
    return getattr(item, field)


def _with_order(item: T, order: int) -> T:
    """Return a copy of item with sequence_order replaced."""
    if isinstance(item, dict):
        return {**item, "sequence_order": order}
    if hasattr(item, "model_copy"):
        return item.model_copy(update={"sequence_order": order})
    raise TypeError(f"Cannot set sequence_order on {type(item).__name__}")


def move_item(
    items: Sequence[T],
    index: int,
    direction: MoveDirection | str,
) -> tuple[list[T], list[IndexChange]]:
    """
    Move the entry at `index` one step toward the start or end.

    The entry swaps places with its neighbour and both get their new
    position as sequence_order. Exactly two indices change; the rest of
    the list is untouched. Moving the first entry up or the last entry
    down is a no-op and returns no changes.

    Args:
        items: The list in its current display order
        index: Position of the entry to move
        direction: MoveDirection.UP or MoveDirection.DOWN

    Returns:
        (new list, changes to persist). The input list is not mutated.

    Raises:
        IndexError: If index is outside the list
    """
    direction = MoveDirection(direction)
    if index < 0 or index >= len(items):
        raise IndexError(f"index {index} out of range for list of {len(items)}")

    neighbour = index - 1 if direction == MoveDirection.UP else index + 1
    if neighbour < 0 or neighbour >= len(items):
        return list(items), []

    moved = items[index]
    displaced = items[neighbour]

    reordered = list(items)
    reordered[neighbour] = _with_order(moved, neighbour)
    reordered[index] = _with_order(displaced, index)

    changes = [
        IndexChange(
            record_id=str(_get(moved, "id")),
            sequence_order=neighbour,
            previous_order=_get(moved, "sequence_order"),
        ),
        IndexChange(
            record_id=str(_get(displaced, "id")),
            sequence_order=index,
            previous_order=_get(displaced, "sequence_order"),
        ),
    ]
    return reordered, changes


def next_sequence_index(items: Iterable[Any]) -> int:
    """
    Position for a new entry appended to `items`.

    max(existing sequence_order) + 1, or 0 for an empty list. Gaps are
    fine; two concurrent callers can compute the same value.
    """
    orders = [_get(item, "sequence_order") for item in items]
    return max(orders) + 1 if orders else 0
