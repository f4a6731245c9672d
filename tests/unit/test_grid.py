"""Unit tests for pitch and bar graph grid mapping."""

from notation.grid import BAR_STEPS, GRID_CELLS, bar_graph_cells, pitch_to_cell


class TestPitchToCell:
    def test_bijective_over_one_period(self):
        """Pitches 0-24 cover all 25 cells exactly once."""
        cells = [pitch_to_cell(pitch) for pitch in range(GRID_CELLS)]
        assert len(set(cells)) == 25
        assert set(cells) == {(x, y) for x in range(5) for y in range(5)}

    def test_row_major_layout(self):
        assert pitch_to_cell(0) == (0, 0)
        assert pitch_to_cell(4) == (4, 0)
        assert pitch_to_cell(5) == (0, 1)
        assert pitch_to_cell(24) == (4, 4)

    def test_period_25(self):
        assert pitch_to_cell(25) == pitch_to_cell(0)
        assert pitch_to_cell(262) == pitch_to_cell(262 - 250)

    def test_negative_pitch_uses_floor_modulo(self):
        # -1 % 25 == 24
        assert pitch_to_cell(-1) == (4, 4)
        assert pitch_to_cell(-25) == (0, 0)

    def test_fractional_pitch_floors_consistently(self):
        assert pitch_to_cell(-0.5) == pitch_to_cell(-1) == (4, 4)
        assert pitch_to_cell(261.63) == pitch_to_cell(261)


class TestBarGraphCells:
    def test_zero_is_empty(self):
        assert bar_graph_cells(0, 10) == []

    def test_full(self):
        cells = bar_graph_cells(10, 10)
        assert len(cells) == 25
        assert len(set(cells)) == 25

    def test_saturates_above_total(self):
        assert sorted(bar_graph_cells(50, 10)) == sorted(bar_graph_cells(10, 10))

    def test_non_positive_total_is_empty(self):
        assert bar_graph_cells(5, 0) == []
        assert bar_graph_cells(5, -3) == []

    def test_grows_from_bottom_centre(self):
        # One step of fifteen lights the bottom centre cell only
        assert bar_graph_cells(1, BAR_STEPS) == [(2, 4)]
        assert bar_graph_cells(3, BAR_STEPS) == [(2, 4), (1, 4), (3, 4), (0, 4), (4, 4)]

    def test_half_fills_lower_rows(self):
        cells = bar_graph_cells(6, 12)  # 7 of 15 steps
        rows = {y for _, y in cells}
        assert rows == {4, 3, 2}
        assert (2, 2) in cells and (1, 2) not in cells

    def test_negative_current_uses_magnitude(self):
        assert bar_graph_cells(-5, 10) == bar_graph_cells(5, 10)
