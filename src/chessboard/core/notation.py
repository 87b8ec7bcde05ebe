"""Board notation parsing and serialization.

Only the piece-placement field of FEN is modelled. Trailing fields (side to
move, castling, en passant, clocks) are accepted on input and dropped.
"""

from __future__ import annotations

from collections.abc import Mapping

from chessboard.core.board import Board
from chessboard.core.enums import Orientation
from chessboard.core.errors import FormatError
from chessboard.core.piece import Piece
from chessboard.core.types import square_name, square_to_coords

STARTING_LAYOUT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def decode(notation: str) -> Board:
    """Parse board notation into a :class:`Board`.

    Raises:
        FormatError: the notation does not have 8 ranks of exactly 8 cells,
            or contains a character that is neither a digit 1-8 nor a piece.
    """
    if not isinstance(notation, str):
        raise FormatError(f"Board notation must be a string, got {notation!r}")
    fields = notation.split()
    if not fields:
        raise FormatError("Empty board notation")
    placement = fields[0]

    ranks = placement.split("/")
    if len(ranks) != 8:
        raise FormatError(f"Invalid board notation (must contain 8 ranks): {notation!r}")

    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if "0" <= ch <= "9":
                step = int(ch)
                if not (1 <= step <= 8):
                    raise FormatError(f"Invalid digit {ch!r} in board notation: {notation!r}")
                col += step
            else:
                if col >= 8:
                    raise FormatError(f"Invalid rank width in board notation: {notation!r}")
                try:
                    board[row, col] = Piece.from_char(ch)
                except ValueError as exc:
                    raise FormatError(f"{exc} in board notation: {notation!r}") from None
                col += 1
            if col > 8:
                raise FormatError(f"Invalid rank width in board notation: {notation!r}")
        if col != 8:
            raise FormatError(f"Invalid rank width in board notation: {notation!r}")
    return board


def encode(board: Board) -> str:
    """Serialise *board* to board notation."""
    rows: list[str] = []
    for cells in board.rows():
        empty = 0
        row = ""
        for piece in cells:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def is_valid_notation(notation: str) -> bool:
    """Whether *notation* decodes without error."""
    try:
        decode(notation)
    except FormatError:
        return False
    return True


# ── Position objects ─────────────────────────────────────────────────────────


def board_from_mapping(mapping: Mapping[str, str]) -> Board:
    """Build a board from ``{"e4": "wP", ...}``.

    Square names use the white-at-bottom labelling; values may be image
    codes (``"bN"``) or notation letters (``"n"``).
    """
    board = Board()
    for square, code in mapping.items():
        coords = square_to_coords(square, Orientation.WHITE)
        if coords is None:
            raise FormatError(f"Invalid square name in position: {square!r}")
        try:
            board[coords] = Piece.from_code(code)
        except ValueError as exc:
            raise FormatError(f"{exc} on square {square!r}") from None
    return board


def board_to_mapping(board: Board) -> dict[str, str]:
    """Inverse of :func:`board_from_mapping`, using image codes."""
    return {
        square_name(coords.row, coords.col, Orientation.WHITE): piece.theme_code
        for coords, piece in board.occupied()
    }
