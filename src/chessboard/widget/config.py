"""Widget configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from chessboard.core.enums import Orientation
from chessboard.core.errors import BoardConfigError
from chessboard.core.piece import Piece
from chessboard.widget.interfaces import MoveHandler

PIECE_PLACEHOLDER = "{piece}"
DEFAULT_PIECE_THEME = "img/chesspieces/wikipedia/{piece}.svg"
START = "start"

# Option names accepted from JavaScript-style configuration objects.
_ALIASES: dict[str, str] = {
    "pieceTheme": "piece_theme",
    "onDrop": "on_drop",
    "showNotation": "show_coordinates",
}


@dataclass(frozen=True)
class BoardConfig:
    """Options recognised by :class:`~chessboard.widget.controller.BoardController`.

    Attributes:
        position: ``"start"``, a board notation string or a position mapping
            (``{"e4": "wP", ...}``).
        orientation: Side drawn at the bottom.
        draggable: Whether the host should allow dragging pieces.
        piece_theme: Image path template containing ``{piece}``.
        on_drop: Default move handler used by ``handle_drop``.
        show_coordinates: Whether renderers draw rank/file labels.
    """

    position: str | Mapping[str, str] = START
    orientation: Orientation = Orientation.WHITE
    draggable: bool = True
    piece_theme: str = DEFAULT_PIECE_THEME
    on_drop: MoveHandler | None = None
    show_coordinates: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "orientation", Orientation.parse(self.orientation))
        if not isinstance(self.piece_theme, str) or PIECE_PLACEHOLDER not in self.piece_theme:
            raise BoardConfigError(
                f"piece_theme must contain {PIECE_PLACEHOLDER!r}: {self.piece_theme!r}"
            )
        if self.on_drop is not None and not callable(self.on_drop):
            raise BoardConfigError(f"on_drop must be callable, got {self.on_drop!r}")
        if not isinstance(self.position, (str, Mapping)):
            raise BoardConfigError(
                f"position must be a string or a mapping, got {self.position!r}"
            )

    @classmethod
    def from_options(
        cls, options: Mapping[str, Any] | None = None, **overrides: Any
    ) -> BoardConfig:
        """Merge *options* and keyword *overrides* over the defaults.

        Both ``piece_theme`` and ``pieceTheme`` spellings are accepted.
        ``None`` values keep the default, as a missing option would.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for source in (options or {}, overrides):
            for key, value in source.items():
                name = _ALIASES.get(key, key)
                if name not in known:
                    raise BoardConfigError(f"Unknown board option: {key!r}")
                if value is None and name != "on_drop":
                    continue
                values[name] = value
        return cls(**values)


def piece_image(piece_theme: str, piece: Piece) -> str:
    """Substitute the piece's image code (e.g. 'bN') into *piece_theme*."""
    return piece_theme.replace(PIECE_PLACEHOLDER, piece.theme_code)
