"""Grid coordinates and square-name mapping.

Grid layout (as drawn, top-left first):
    row 0 is the top row, row 7 the bottom row
    col 0 is the left column, col 7 the right column

With white at the bottom, (0, 0) is a8 and (7, 7) is h1. With black at the
bottom the labels are mirrored on both axes, so (0, 0) is h1.
"""

from __future__ import annotations

from typing import NamedTuple

from chessboard.core.enums import Orientation

FILES: tuple[str, ...] = ("a", "b", "c", "d", "e", "f", "g", "h")
_FILES_REVERSED: tuple[str, ...] = tuple(reversed(FILES))


class Coords(NamedTuple):
    """Grid position of a single cell."""

    row: int
    col: int


def files_for(orientation: Orientation) -> tuple[str, ...]:
    """File letters in column order for *orientation*."""
    return _FILES_REVERSED if orientation is Orientation.BLACK else FILES


def square_name(row: int, col: int, orientation: Orientation) -> str:
    """Algebraic name of grid cell (*row*, *col*), e.g. (0, 0) → 'a8'."""
    if not (0 <= row < 8 and 0 <= col < 8):
        raise IndexError(f"Grid coordinates out of range: ({row}, {col})")
    file = files_for(orientation)[col]
    rank = row + 1 if orientation is Orientation.BLACK else 8 - row
    return f"{file}{rank}"


def square_to_coords(square: object, orientation: Orientation) -> Coords | None:
    """Grid position of *square*, or ``None`` when it is not a square name."""
    if not isinstance(square, str) or len(square) != 2:
        return None
    file_char, rank_char = square
    if rank_char not in "12345678":
        return None
    files = files_for(orientation)
    if file_char not in files:
        return None
    col = files.index(file_char)
    rank = int(rank_char)
    row = rank - 1 if orientation is Orientation.BLACK else 8 - rank
    return Coords(row, col)


def is_light_square(row: int, col: int) -> bool:
    """Whether the drawn cell at (*row*, *col*) uses the light colour."""
    return (row + col) % 2 == 0


def all_square_names(orientation: Orientation) -> list[str]:
    """All 64 square names in row-major grid order."""
    return [square_name(r, c, orientation) for r in range(8) for c in range(8)]
