"""PieceItem: draggable chess piece on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont
from PyQt6.QtSvgWidgets import QGraphicsSvgItem
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from chessboard.core.piece import Piece
from chessboard.ui.resources import piece_renderer


class PieceItem(QGraphicsSvgItem):
    """A single chess piece on the board.

    Stores the *square* name it was drawn on and supports drag & drop.
    Without a usable image the Unicode glyph is drawn instead.
    """

    _MARGIN_RATIO = 0.03

    def __init__(
        self,
        piece: Piece,
        square: str,
        tile_size: int,
        piece_theme: str,
        glyph_color: QColor | None = None,
    ) -> None:
        super().__init__()
        self.piece = piece
        self.square = square
        self._tile_size = tile_size
        self._margin = 0.0
        self._draw_size = 1.0
        self._drag_origin: QPointF | None = None
        self._glyph: QGraphicsSimpleTextItem | None = None

        renderer = piece_renderer(piece_theme, piece)
        if renderer is not None:
            self.setSharedRenderer(renderer)
        else:
            self._glyph = QGraphicsSimpleTextItem(piece.symbol, self)
            self._glyph.setBrush(QBrush(glyph_color or QColor(20, 20, 20)))
            self._glyph.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setTransformOriginPoint(0.0, 0.0)
        self.setCacheMode(QGraphicsItem.CacheMode.NoCache)
        self._update_size(tile_size)

        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    @property
    def margin(self) -> float:
        """Inner margin to keep the piece away from tile edges."""
        return self._margin

    @property
    def has_image(self) -> bool:
        return self._glyph is None

    def boundingRect(self) -> QRectF:
        if self._glyph is not None:
            return QRectF(0.0, 0.0, self._draw_size, self._draw_size)
        return super().boundingRect()

    def enable_drag(self, enabled: bool) -> None:
        """Allow / disallow dragging."""
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, enabled)
        if enabled:
            self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        else:
            self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))

    def start_drag(self) -> None:
        """Called at the beginning of a drag gesture."""
        self._drag_origin = self.pos()
        self.setZValue(10)  # bring to front
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))
        self.setOpacity(0.85)

    def cancel_drag(self) -> None:
        """Snap back to original position."""
        if self._drag_origin is not None:
            self.setPos(self._drag_origin)
        self._finish_drag()

    def _finish_drag(self) -> None:
        self._drag_origin = None
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        self.setOpacity(1.0)

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        self._margin = float(size) * self._MARGIN_RATIO
        draw_size = max(float(size) - 2.0 * self._margin, 1.0)
        self._draw_size = draw_size

        if self._glyph is not None:
            font = QFont()
            font.setPixelSize(max(int(draw_size * 0.8), 1))
            self._glyph.setFont(font)
            bounds = self._glyph.boundingRect()
            self._glyph.setPos(
                (draw_size - bounds.width()) / 2, (draw_size - bounds.height()) / 2
            )
            return

        renderer = self.renderer()
        if renderer is None:
            return
        bounds = self.boundingRect()
        width = float(bounds.width()) or float(renderer.defaultSize().width()) or 1.0
        height = float(bounds.height()) or float(renderer.defaultSize().height()) or 1.0
        scale = min(draw_size / width, draw_size / height)
        self.setScale(scale)
