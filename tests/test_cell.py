"""Unit tests for Cell and OccupantKind."""

import pytest
from forest_growth.cell import Cell, OccupantKind, is_flammable
from forest_growth.constants import BURNED_MAX, BURNING_MAX, FAST_MAX, SLOW_MAX


class TestOccupantKind:
    """Test cases for OccupantKind enum."""

    def test_kinds_exist(self):
        """Test that all expected occupant kinds exist."""
        assert OccupantKind.SlowGrowing
        assert OccupantKind.FastGrowing
        assert OccupantKind.Burning
        assert OccupantKind.Burned

    def test_max_ages(self):
        assert OccupantKind.SlowGrowing.max_age == SLOW_MAX == 11
        assert OccupantKind.FastGrowing.max_age == FAST_MAX == 3
        assert OccupantKind.Burning.max_age == BURNING_MAX == 7
        assert OccupantKind.Burned.max_age == BURNED_MAX == 1


class TestCell:
    """Test cases for Cell."""

    def test_fresh_cell_starts_at_max_age(self):
        cell = Cell.fresh(OccupantKind.SlowGrowing)
        assert cell.age == SLOW_MAX
        assert cell.kind == OccupantKind.SlowGrowing

    def test_aged_decrements_by_one(self):
        cell = Cell(age=3, kind=OccupantKind.FastGrowing)
        assert cell.aged() == Cell(age=2, kind=OccupantKind.FastGrowing)
        # Original is unchanged
        assert cell.age == 3

    def test_aged_is_floored_at_zero(self):
        cell = Cell(age=0, kind=OccupantKind.Burning)
        assert cell.aged().age == 0

    def test_negative_age_rejected(self):
        with pytest.raises(ValueError):
            Cell(age=-1, kind=OccupantKind.Burned)

    def test_cells_are_immutable(self):
        cell = Cell.fresh(OccupantKind.Burned)
        with pytest.raises(AttributeError):
            cell.age = 5

    @pytest.mark.parametrize("kind, tree, fire", [
        (OccupantKind.SlowGrowing, True, False),
        (OccupantKind.FastGrowing, True, False),
        (OccupantKind.Burning, False, True),
        (OccupantKind.Burned, False, True),
    ])
    def test_kind_groups(self, kind, tree, fire):
        cell = Cell.fresh(kind)
        assert cell.is_tree is tree
        assert cell.is_fire is fire

    def test_str(self):
        assert str(Cell(age=2, kind=OccupantKind.Burning)) == "Burning(age=2)"


class TestFlammability:
    """Fire spreads only onto living trees."""

    def test_empty_is_not_flammable(self):
        assert is_flammable(None) is False

    def test_trees_are_flammable(self):
        assert is_flammable(Cell.fresh(OccupantKind.SlowGrowing))
        assert is_flammable(Cell.fresh(OccupantKind.FastGrowing))

    def test_fire_and_ash_are_not_flammable(self):
        assert not is_flammable(Cell.fresh(OccupantKind.Burning))
        assert not is_flammable(Cell.fresh(OccupantKind.Burned))
