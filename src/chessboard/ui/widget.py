"""ChessboardWidget: mountable board widget bundling controller and view."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from PyQt6.QtWidgets import QLayout, QVBoxLayout, QWidget

from chessboard.core.errors import BoardConfigError
from chessboard.ui.board.board_scene import BoardScene
from chessboard.ui.board.board_view import BoardView
from chessboard.widget.config import BoardConfig
from chessboard.widget.controller import BoardController


class ChessboardWidget(QWidget):
    """A board view wired to its own :class:`BoardController`.

    Position, orientation and drop handling are reached through
    :attr:`controller`; the widget only owns the visuals.
    """

    def __init__(
        self,
        config: BoardConfig | Mapping[str, Any] | None = None,
        parent: QWidget | None = None,
        **options: Any,
    ) -> None:
        super().__init__(parent)
        self._controller = BoardController(config, **options)
        self._scene = BoardScene(self._controller, self)
        self._view = BoardView(self._scene, self)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._view)

    @property
    def controller(self) -> BoardController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._view


def create_board(
    mount: QWidget | QLayout | None,
    config: BoardConfig | Mapping[str, Any] | None = None,
    **options: Any,
) -> ChessboardWidget:
    """Create a board and add it to *mount* (a widget or a layout).

    Raises:
        BoardConfigError: *mount* is missing or not a widget/layout.
        FormatError: the configured position is malformed.
    """
    if mount is None:
        raise BoardConfigError("Chessboard: mount target not found")
    if isinstance(mount, QLayout):
        board = ChessboardWidget(config, **options)
        mount.addWidget(board)
        return board
    if isinstance(mount, QWidget):
        board = ChessboardWidget(config, mount, **options)
        layout = mount.layout()
        if layout is not None:
            layout.addWidget(board)
        return board
    raise BoardConfigError(f"Chessboard: unsupported mount target {mount!r}")
