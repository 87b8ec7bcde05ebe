"""BoardScene: QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QApplication,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessboard.core.board import Board
from chessboard.core.enums import MoveOutcome, Orientation
from chessboard.core.types import is_light_square, square_name
from chessboard.ui.board.piece_item import PieceItem
from chessboard.ui.styles.theme import BoardTheme
from chessboard.widget.config import DEFAULT_PIECE_THEME

if TYPE_CHECKING:
    from chessboard.widget.controller import BoardController


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates and piece items for a controller.

    Grid cell (row, col) is drawn at column *col*, row *row*, and tagged
    with its square name under the current orientation.

    Signals:
        drop_finished(str, str, str): source, target and outcome of a drop.
    """

    drop_finished = pyqtSignal(str, str, str)

    TILE = 80  # px per square

    def __init__(
        self,
        controller: BoardController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board = Board()
        self._orientation = Orientation.WHITE
        self._piece_theme = DEFAULT_PIECE_THEME
        self._controller: BoardController | None = None
        self._show_coordinates = True

        # Interaction state
        self._dragging_item: PieceItem | None = None
        self._origin_highlight: QGraphicsRectItem | None = None

        # Visual layers
        self._square_items: dict[str, QGraphicsRectItem] = {}
        self._piece_items: dict[str, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()
        if controller is not None:
            self.attach(controller)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> BoardController | None:
        return self._controller

    def attach(self, controller: BoardController) -> None:
        """Bind to *controller* and draw its current state."""
        self._controller = controller
        self.set_show_coordinates(controller.config.show_coordinates)
        controller.attach_renderer(SceneRenderer(self))

    def show_board(
        self, board: Board, orientation: Orientation, piece_theme: str
    ) -> None:
        """Redraw squares and pieces."""
        self._board = board
        self._piece_theme = piece_theme
        if orientation is not self._orientation or not self._square_items:
            self._orientation = orientation
            self._draw_board()
        self._clear_drag()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def square_names(self) -> list[str]:
        """Square labels in row-major drawing order."""
        return list(self._square_items)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Sans Serif", max(9, t // 8))

        for row in range(8):
            for col in range(8):
                name = square_name(row, col, self._orientation)
                is_light = is_light_square(row, col)
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                rect.setData(0, name)
                self.addItem(rect)
                self._square_items[name] = rect

                text_color = self._theme.coord_dark if is_light else self._theme.coord_light

                # Rank numbers (left edge)
                if col == 0:
                    self._add_coord(name[1], col * t + 2, row * t + 1, font, text_color)

                # File letters (bottom edge)
                if row == 7:
                    self._add_coord(
                        name[0], col * t + t - 12, row * t + t - 16, font, text_color
                    )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self.TILE
        for (row, col), piece in self._board.occupied():
            name = square_name(row, col, self._orientation)
            item = PieceItem(piece, name, t, self._piece_theme, self._theme.glyph)
            item.setPos(col * t + item.margin, row * t + item.margin)
            self.addItem(item)
            self._piece_items[name] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if (
            self._controller is not None
            and event is not None
            and event.button() == Qt.MouseButton.LeftButton
        ):
            sq = self._pos_to_square(event.scenePos())
            if sq is not None:
                self.begin_drag(sq)
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if (
            self._dragging_item is not None
            and event is not None
            and event.button() == Qt.MouseButton.LeftButton
        ):
            if _is_click(event):
                self.cancel_drop()
            else:
                self.finish_drop(self._pos_to_square(event.scenePos()))
        super().mouseReleaseEvent(event)

    def begin_drag(self, square: str) -> bool:
        """Pick up the piece on *square* if the controller allows it."""
        item = self._piece_items.get(square)
        if item is None or self._controller is None:
            return False
        if not self._controller.on_drag_start(square):
            return False
        self._clear_drag()
        item.enable_drag(True)
        item.start_drag()
        self._dragging_item = item
        self._origin_highlight = self._make_highlight(square)
        return True

    def finish_drop(self, target: str | None) -> MoveOutcome | None:
        """Drop the dragged piece on *target* (``None`` = off the board)."""
        item = self._dragging_item
        if item is None or self._controller is None:
            return None
        source = item.square
        self._clear_drag()

        # An accepted drop re-renders and replaces every piece item.
        outcome = self._controller.handle_drop(source, target or "")
        if outcome is not MoveOutcome.ACCEPTED:
            item.cancel_drag()
            item.enable_drag(False)
        self.drop_finished.emit(source, target or "", str(outcome))
        return outcome

    def cancel_drop(self) -> None:
        """Put the dragged piece back without reporting a drop."""
        item = self._dragging_item
        if item is None:
            return
        self._clear_drag()
        item.cancel_drag()
        item.enable_drag(False)

    def _clear_drag(self) -> None:
        self._dragging_item = None
        if self._origin_highlight is not None:
            self.removeItem(self._origin_highlight)
            self._origin_highlight = None

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> str | None:
        """Scene position → square name."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return square_name(row, col, self._orientation)

    def _square_pos(self, square: str) -> QPointF:
        """Top-left corner of *square* in scene coordinates."""
        rect = self._square_items[square].rect()
        return rect.topLeft()

    def _make_highlight(self, square: str) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        origin = self._square_pos(square)
        rect = QGraphicsRectItem(origin.x(), origin.y(), t, t)
        rect.setBrush(QBrush(self._theme.highlight_from))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect


def _is_click(event: QGraphicsSceneMouseEvent) -> bool:
    """True if the pointer moved less than the drag distance since the press."""
    moved = event.screenPos() - event.buttonDownScreenPos(Qt.MouseButton.LeftButton)
    return moved.manhattanLength() < QApplication.startDragDistance()


class SceneRenderer:
    """Renderer adapter that forwards controller updates to a :class:`BoardScene`.

    Kept separate because ``QGraphicsScene.render`` already exists with a
    painter-based signature.
    """

    __slots__ = ("_scene",)

    def __init__(self, scene: BoardScene) -> None:
        self._scene = scene

    def render(self, board: Board, orientation: Orientation, piece_theme: str) -> None:
        self._scene.show_board(board, orientation, piece_theme)
