"""Core board model: notation and coordinates with zero external dependencies.

Quick start::

    from chessboard.core import Orientation, decode, encode, square_name

    board = decode("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
    assert square_name(0, 0, Orientation.BLACK) == "h1"
    print(encode(board))
"""

from chessboard.core.board import Board, Grid
from chessboard.core.enums import Color, MoveOutcome, Orientation, PieceType
from chessboard.core.errors import BoardConfigError, ChessboardError, FormatError
from chessboard.core.notation import (
    STARTING_LAYOUT,
    board_from_mapping,
    board_to_mapping,
    decode,
    encode,
    is_valid_notation,
)
from chessboard.core.piece import Piece
from chessboard.core.types import (
    FILES,
    Coords,
    all_square_names,
    files_for,
    is_light_square,
    square_name,
    square_to_coords,
)

__all__ = [
    # Enums
    "Color",
    "MoveOutcome",
    "Orientation",
    "PieceType",
    # Errors
    "BoardConfigError",
    "ChessboardError",
    "FormatError",
    # Types / helpers
    "FILES",
    "Coords",
    "all_square_names",
    "files_for",
    "is_light_square",
    "square_name",
    "square_to_coords",
    # Domain objects
    "Board",
    "Grid",
    "Piece",
    # Notation
    "STARTING_LAYOUT",
    "board_from_mapping",
    "board_to_mapping",
    "decode",
    "encode",
    "is_valid_notation",
]
