"""Piece image loading for piece-theme templates."""

from __future__ import annotations

import logging

from PyQt6.QtSvg import QSvgRenderer

from chessboard.core.piece import Piece
from chessboard.runtime_assets import resolve_asset
from chessboard.widget.config import DEFAULT_PIECE_THEME, piece_image

_LOGGER = logging.getLogger(__name__)

# Cache SVG renderers (one per resolved image path)
_renderers: dict[str, QSvgRenderer | None] = {}


def piece_image_path(piece_theme: str, piece: Piece) -> str:
    """Resolved file path of the image for *piece* under *piece_theme*."""
    return str(resolve_asset(piece_image(piece_theme, piece)))


def piece_renderer(piece_theme: str, piece: Piece) -> QSvgRenderer | None:
    """Return a cached SVG renderer for *piece*, or ``None`` if the image is missing."""
    path = piece_image_path(piece_theme, piece)
    if path not in _renderers:
        renderer = QSvgRenderer(path)
        if not renderer.isValid():
            # No images ship with the package; glyphs are the expected default.
            level = logging.DEBUG if piece_theme == DEFAULT_PIECE_THEME else logging.WARNING
            _LOGGER.log(level, "Piece image not found or invalid: %s", path)
            _renderers[path] = None
        else:
            _renderers[path] = renderer
    return _renderers[path]
