"""Grid geometry and rendering utilities."""

from typing import Iterable, List, Optional, Sequence


GRID_SIZE = 5
WORD_LENGTH = 5
CELL_COUNT = GRID_SIZE * GRID_SIZE


def row_indices(row: int) -> List[int]:
    """Board indices of a row, left to right."""
    if not 0 <= row < GRID_SIZE:
        raise ValueError(f"Row {row} out of range (0-{GRID_SIZE - 1})")
    start = row * GRID_SIZE
    return list(range(start, start + GRID_SIZE))


def split_rows(letters: Sequence[str]) -> List[str]:
    """Slice a flat 25-cell grid into its five row strings."""
    if len(letters) != CELL_COUNT:
        raise ValueError(f"Expected {CELL_COUNT} cells, got {len(letters)}")
    return [''.join(letters[i:i + GRID_SIZE]) for i in range(0, CELL_COUNT, GRID_SIZE)]


def render_grid(
    letters: Sequence[str],
    locked: Optional[Iterable[int]] = None,
    selected: Optional[Sequence[int]] = None,
) -> str:
    """
    Render the grid to a string.

    Locked cells are shown in lowercase, selected cells in brackets
    with their selection order appended.
    """
    locked_set = set(locked or ())
    order = {idx: pos + 1 for pos, idx in enumerate(selected or ())}

    lines = []
    for row in range(GRID_SIZE):
        cells = []
        for idx in row_indices(row):
            char = letters[idx]
            if idx in locked_set:
                char = char.lower()
            if idx in order:
                cells.append(f"[{char}{order[idx]}]")
            else:
                cells.append(f" {char}  ")
        lines.append(''.join(cells).rstrip())

    return '\n'.join(lines)
