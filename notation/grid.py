"""Mapping of pitches and progress values onto a 5x5 LED grid."""

import math
from typing import List, Tuple

GRID_SIZE = 5
GRID_CELLS = GRID_SIZE * GRID_SIZE

# A bar graph lights mirrored cell pairs: 3 steps per row, 5 rows
BAR_STEPS = 15


def pitch_to_cell(pitch: float) -> Tuple[int, int]:
    """Map a pitch to an (x, y) grid cell.

    Uses floor modulo, so negative pitches also land in 0..24.

    Args:
        pitch: Pitch identifier (typically a frequency in Hz)

    Returns:
        (x, y) with x = index % 5 and y = index // 5, index = pitch % 25
    """
    index = math.floor(pitch) % GRID_CELLS
    return index % GRID_SIZE, index // GRID_SIZE


def bar_graph_cells(current: float, total: float) -> List[Tuple[int, int]]:
    """Cells lit by a vertical bar graph of current out of total.

    The bar grows from the bottom row upwards and from the centre column
    outwards. Values above total saturate to a full grid; a non-positive
    total yields an empty grid.

    Args:
        current: Progress value (sign ignored)
        total: Value corresponding to a full bar

    Returns:
        List of (x, y) cells to light
    """
    if total <= 0:
        return []

    lit_steps = min(BAR_STEPS, int(abs(current) * BAR_STEPS // total))

    cells: List[Tuple[int, int]] = []
    step = 0
    for y in range(GRID_SIZE - 1, -1, -1):
        for offset in range(3):
            if step >= lit_steps:
                return cells
            cells.append((2 - offset, y))
            if offset:
                cells.append((2 + offset, y))
            step += 1
    return cells
