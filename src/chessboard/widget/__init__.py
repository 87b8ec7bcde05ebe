"""Widget layer: board controller, configuration and renderer protocol.

Quick start::

    from chessboard.widget import BoardController, SNAPBACK

    ctrl = BoardController(position="start", orientation="white")
    ctrl.handle_drop("e2", "e4")
    ctrl.handle_drop("e7", "e5", lambda source, target: SNAPBACK)
    print(ctrl.get_notation())
"""

from chessboard.widget.config import (
    DEFAULT_PIECE_THEME,
    PIECE_PLACEHOLDER,
    START,
    BoardConfig,
    piece_image,
)
from chessboard.widget.controller import BoardController, BoardEvents
from chessboard.widget.interfaces import SNAPBACK, IBoardRenderer, MoveHandler

__all__ = [
    "DEFAULT_PIECE_THEME",
    "PIECE_PLACEHOLDER",
    "SNAPBACK",
    "START",
    "BoardConfig",
    "BoardController",
    "BoardEvents",
    "IBoardRenderer",
    "MoveHandler",
    "piece_image",
]
