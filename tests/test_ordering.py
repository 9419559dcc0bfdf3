# =============================================================================
# tests/test_ordering.py - Reordering and Index Assignment Tests
# =============================================================================
# move_item and next_sequence_index are pure, so these tests need no mocks.
# =============================================================================

import pytest

from core.models.look import Look
from core.ordering import IndexChange, MoveDirection, move_item, next_sequence_index


def _looks(*names):
    return [
        Look(id=f"look-{i}", production_id="prod-1", name=name, sequence_order=i)
        for i, name in enumerate(names)
    ]


# =============================================================================
# move_item
# =============================================================================

class TestMoveItem:
    """Tests for one-step moves."""

    def test_move_up_swaps_with_previous(self):
        """[A, B, C], move C up -> [A, C, B] with C=1, B=2."""
        looks = _looks("A", "B", "C")

        reordered, changes = move_item(looks, 2, MoveDirection.UP)

        assert [look.name for look in reordered] == ["A", "C", "B"]
        assert [look.sequence_order for look in reordered] == [0, 1, 2]
        assert changes == [
            IndexChange(record_id="look-2", sequence_order=1, previous_order=2),
            IndexChange(record_id="look-1", sequence_order=2, previous_order=1),
        ]

    def test_move_down_swaps_with_next(self):
        looks = _looks("A", "B", "C")

        reordered, changes = move_item(looks, 0, "down")

        assert [look.name for look in reordered] == ["B", "A", "C"]
        assert {c.record_id: c.sequence_order for c in changes} == {"look-0": 1, "look-1": 0}

    def test_exactly_two_indices_change(self):
        looks = _looks("A", "B", "C", "D", "E")

        reordered, changes = move_item(looks, 3, MoveDirection.UP)

        assert len(changes) == 2
        untouched = [reordered[i] for i in (0, 1, 4)]
        assert untouched == [looks[0], looks[1], looks[4]]

    def test_first_item_up_is_noop(self):
        looks = _looks("A", "B", "C")

        reordered, changes = move_item(looks, 0, MoveDirection.UP)

        assert reordered == looks
        assert changes == []

    def test_last_item_down_is_noop(self):
        looks = _looks("A", "B", "C")

        reordered, changes = move_item(looks, 2, MoveDirection.DOWN)

        assert reordered == looks
        assert changes == []

    def test_input_list_not_mutated(self):
        looks = _looks("A", "B")
        before = list(looks)

        move_item(looks, 1, MoveDirection.UP)

        assert looks == before
        assert looks[1].sequence_order == 1

    def test_works_on_row_dicts(self):
        rows = [
            {"id": "a", "sequence_order": 0},
            {"id": "b", "sequence_order": 1},
        ]

        reordered, changes = move_item(rows, 1, MoveDirection.UP)

        assert reordered == [
            {"id": "b", "sequence_order": 0},
            {"id": "a", "sequence_order": 1},
        ]
        assert changes[0].record_id == "b"

    def test_index_out_of_range(self):
        with pytest.raises(IndexError):
            move_item(_looks("A"), 3, MoveDirection.UP)

    def test_invalid_direction(self):
        with pytest.raises(ValueError):
            move_item(_looks("A", "B"), 0, "sideways")


# =============================================================================
# next_sequence_index
# =============================================================================

class TestNextSequenceIndex:
    """Tests for index assignment on create."""

    def test_empty_list_starts_at_zero(self):
        assert next_sequence_index([]) == 0

    def test_max_plus_one(self):
        assert next_sequence_index(_looks("A", "B", "C")) == 3

    def test_gaps_are_not_filled(self):
        rows = [{"sequence_order": 0}, {"sequence_order": 4}, {"sequence_order": 2}]

        assert next_sequence_index(rows) == 5
