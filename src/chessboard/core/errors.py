"""Exception hierarchy for the chessboard package."""

from __future__ import annotations


class ChessboardError(Exception):
    """Base class for all chessboard errors."""


class FormatError(ChessboardError, ValueError):
    """Malformed board notation or position mapping."""


class BoardConfigError(ChessboardError, ValueError):
    """Invalid widget configuration (fatal, never retried)."""
