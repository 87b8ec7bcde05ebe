"""Interfaces for the widget layer.

The controller depends on :class:`IBoardRenderer`, never on a concrete
toolkit, so the board model stays usable without Qt.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chessboard.core.board import Board
    from chessboard.core.enums import Orientation

# source square, target square -> SNAPBACK to reject, anything else accepts
MoveHandler = Callable[[str, str], object]

SNAPBACK = "snapback"


class IBoardRenderer(Protocol):
    """Protocol for presentation layers driven by a board controller."""

    def render(self, board: Board, orientation: Orientation, piece_theme: str) -> None:
        """Redraw squares and pieces.

        Called after initialisation and after every state-mutating
        controller operation. *board* is a private copy.
        """
