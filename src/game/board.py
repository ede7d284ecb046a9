"""
Row commit for accepted words.

When a word is accepted its five letters, wherever they sit on the board,
move into a fixed destination row in the order they were selected. Cells
already in that row play one of three roles:

- stayer: in the row and part of the word; simply rewritten in word order
- evictee: in the row but not part of the word; must leave the row
- incomer (the other side): part of the word but outside the row

Evictees and incomers always pair up one-to-one, so each evicted letter
moves into the cell an incoming letter vacated. Every write reads from a
snapshot taken before the first write, which keeps overlapping and cyclic
index sets correct where serial pairwise swaps would undo earlier moves.
"""

from typing import List, Sequence

from .models import Board, RowCommit
from ..verifiers.grid import CELL_COUNT, GRID_SIZE, WORD_LENGTH, row_indices


def create_initial_board(letters: Sequence[str]) -> Board:
    """Identity arrangement of a puzzle's letters."""
    return Board.identity(letters)


def _check_commit_args(source_indices: Sequence[int], target_row: int) -> None:
    if len(source_indices) != WORD_LENGTH:
        raise ValueError(f"Expected {WORD_LENGTH} source indices, got {len(source_indices)}")
    if len(set(source_indices)) != WORD_LENGTH:
        raise ValueError(f"Source indices must be distinct: {list(source_indices)}")
    for idx in source_indices:
        if not 0 <= idx < CELL_COUNT:
            raise ValueError(f"Source index {idx} out of range (0-{CELL_COUNT - 1})")
    if not 0 <= target_row < GRID_SIZE:
        raise ValueError(f"Target row {target_row} out of range (0-{GRID_SIZE - 1})")


def swap_rows_for_submission(
    board: Board,
    source_indices: Sequence[int],
    target_row: int,
) -> RowCommit:
    """
    Move a selected word into a row, relocating whatever it displaces.

    Args:
        board: Current board (left untouched)
        source_indices: The word's cells, in selection order
        target_row: Row to fill (0-4)

    Returns:
        RowCommit with the new board and the row's indices, which are the
        cells that now hold the word

    Raises:
        ValueError: If the indices are not five distinct cells or the row
            is out of range
    """
    _check_commit_args(source_indices, target_row)

    snapshot_letters = list(board.letters)
    snapshot_origin = list(board.original_index)
    new_letters = list(board.letters)
    new_origin = list(board.original_index)

    target = row_indices(target_row)
    source = list(source_indices)

    # Word into the row, in selection order
    for t, s in zip(target, source):
        new_letters[t] = snapshot_letters[s]
        new_origin[t] = snapshot_origin[s]

    incomers: List[int] = [idx for idx in source if idx not in target]
    evictees: List[int] = [idx for idx in target if idx not in source]

    # Displaced row content into the cells the word vacated
    for evicted, vacated in zip(evictees, incomers):
        new_letters[vacated] = snapshot_letters[evicted]
        new_origin[vacated] = snapshot_origin[evicted]

    return RowCommit(
        board=Board(letters=new_letters, original_index=new_origin),
        destination_indices=target,
    )
