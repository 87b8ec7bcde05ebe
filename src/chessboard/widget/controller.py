"""BoardController: owns the board state and mediates drag-and-drop moves.

Coordinates: Board, notation codec, coordinate mapper, renderer.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from chessboard.core.board import Board
from chessboard.core.enums import MoveOutcome, Orientation
from chessboard.core.errors import FormatError
from chessboard.core.notation import (
    STARTING_LAYOUT,
    board_from_mapping,
    board_to_mapping,
    decode,
    encode,
)
from chessboard.core.piece import Piece
from chessboard.core.types import square_to_coords
from chessboard.widget.config import START, BoardConfig, piece_image
from chessboard.widget.interfaces import SNAPBACK, IBoardRenderer, MoveHandler

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

DropCallback = Callable[[str, str, MoveOutcome], None]  # source, target, outcome
ChangeCallback = Callable[[str], None]  # new notation


@dataclass
class BoardEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_drop_finished: list[DropCallback] = field(default_factory=list)
    on_change: list[ChangeCallback] = field(default_factory=list)


def _board_for(position: str | Mapping[str, str]) -> Board:
    if isinstance(position, Mapping):
        return board_from_mapping(position)
    if not isinstance(position, str):
        raise FormatError(f"Unsupported position value: {position!r}")
    if position.strip() == START:
        return decode(STARTING_LAYOUT)
    return decode(position)


# ── Controller ───────────────────────────────────────────────────────────────


class BoardController:
    """Board state plus orientation, with a single-step drop transaction.

    Thread-safety: all methods are meant to be called from the UI thread.
    Every state-mutating call finishes by invoking the renderer.
    """

    __slots__ = ("_config", "_board", "_orientation", "_renderer", "events", "__weakref__")

    def __init__(
        self,
        config: BoardConfig | Mapping[str, Any] | None = None,
        renderer: IBoardRenderer | None = None,
        **options: Any,
    ) -> None:
        if not isinstance(config, BoardConfig):
            config = BoardConfig.from_options(config, **options)
        elif options:
            config = BoardConfig.from_options(
                {f.name: getattr(config, f.name) for f in fields(config)}, **options
            )
        self._config = config
        self._board = _board_for(config.position)
        self._orientation = config.orientation
        self._renderer = renderer
        self.events = BoardEvents()
        self.redraw()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> BoardConfig:
        return self._config

    @property
    def board(self) -> Board:
        """Copy of the current board."""
        return self._board.copy()

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def draggable(self) -> bool:
        return self._config.draggable

    def piece_at(self, square: str) -> Piece | None:
        """Piece on *square* under the current orientation (``None`` if invalid)."""
        coords = square_to_coords(square, self._orientation)
        if coords is None:
            return None
        return self._board[coords]

    def get_notation(self) -> str:
        return encode(self._board)

    def position(self) -> dict[str, str]:
        """Current position as ``{"e4": "wP", ...}``."""
        return board_to_mapping(self._board)

    def piece_image(self, piece: Piece) -> str:
        """Image path for *piece* from the configured piece theme."""
        return piece_image(self._config.piece_theme, piece)

    # ── Renderer ─────────────────────────────────────────────────────────

    def attach_renderer(self, renderer: IBoardRenderer | None) -> None:
        self._renderer = renderer
        self.redraw()

    def redraw(self) -> None:
        if self._renderer is not None:
            self._renderer.render(
                self._board.copy(), self._orientation, self._config.piece_theme
            )

    def _changed(self) -> None:
        notation = self.get_notation()
        self.redraw()
        for cb in self.events.on_change:
            cb(notation)

    # ── Position / orientation ───────────────────────────────────────────

    def set_position(self, position: str | Mapping[str, str]) -> None:
        """Replace the board from ``"start"``, notation or a position mapping.

        Raises:
            FormatError: *position* is not well-formed. The board is unchanged.
        """
        self._board = _board_for(position)
        _LOGGER.debug("Position set to %s", self.get_notation())
        self._changed()

    def start(self) -> None:
        self.set_position(START)

    def clear(self) -> None:
        self._board = Board()
        self._changed()

    def set_orientation(self, orientation: Orientation | str) -> None:
        """Change which side is drawn at the bottom. Pieces are not moved."""
        self._orientation = Orientation.parse(orientation)
        self.redraw()

    def flip(self) -> None:
        self.set_orientation(self._orientation.flipped)

    # ── Drag and drop ────────────────────────────────────────────────────

    def on_drag_start(self, square: str) -> bool:
        """Whether a drag may begin on *square*."""
        if not self._config.draggable:
            return False
        return self.piece_at(square) is not None

    def handle_drop(
        self,
        source: str,
        target: str,
        move_handler: MoveHandler | None = None,
    ) -> MoveOutcome:
        """Resolve a drop of the piece on *source* onto *target*.

        The handler (default: the configured ``on_drop``) returns
        ``"snapback"`` to reject the move; any other value accepts it.
        Exceptions raised by the handler propagate with the board untouched.
        """
        src = square_to_coords(source, self._orientation)
        dst = square_to_coords(target, self._orientation)
        if src is None or dst is None or self._board[src] is None:
            outcome = MoveOutcome.IGNORED
        else:
            handler = move_handler if move_handler is not None else self._config.on_drop
            result = handler(source, target) if handler is not None else None
            if result == SNAPBACK:
                outcome = MoveOutcome.REJECTED
            else:
                outcome = MoveOutcome.ACCEPTED
                self._board.move_piece(src, dst)

        _LOGGER.debug("Drop %s -> %s: %s", source, target, outcome)
        if outcome is MoveOutcome.ACCEPTED:
            self._changed()
        for cb in self.events.on_drop_finished:
            cb(source, target, outcome)
        return outcome
