"""Checking whether a tic-tac-toe position can arise in a real game."""

from __future__ import annotations

from collections.abc import Sequence

_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def valid_tic_tac_toe(board: Sequence[str]) -> bool:
    """Return True if the 3x3 ``board`` of 'X', 'O' and ' ' is reachable with X moving first."""
    if len(board) != 3 or any(len(row) != 3 for row in board):
        raise ValueError("board must be three rows of three cells")
    cells = "".join(board)
    if cells.count(" ") == 9:
        return True

    x_wins = o_wins = 0
    for a, b, c in _LINES:
        if cells[a] == cells[b] == cells[c]:
            if cells[a] == "X":
                x_wins += 1
            elif cells[a] == "O":
                o_wins += 1

    x_count = cells.count("X")
    o_count = cells.count("O")

    invalid = (
        o_count > x_count
        or x_count - o_count > 1
        or x_wins > 2
        or o_wins > 2
        or (x_wins > 0 and o_wins > 0)
        or (x_wins > 0 and x_count == o_count)
        or (o_wins > 0 and o_count < x_count)
    )
    return not invalid