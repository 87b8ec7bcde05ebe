"""Core enumerations for the board model."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Piece color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def prefix(self) -> str:
        """Single-letter prefix used in piece image codes ('w' / 'b')."""
        return "w" if self is Color.WHITE else "b"

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Orientation(Enum):
    """Which side of the board is drawn at the bottom (grid row 7)."""

    WHITE = "white"
    BLACK = "black"

    @property
    def flipped(self) -> Orientation:
        return Orientation.BLACK if self is Orientation.WHITE else Orientation.WHITE

    @classmethod
    def parse(cls, value: Orientation | str | None) -> Orientation:
        """Normalise *value*; anything other than ``"black"`` means white."""
        if isinstance(value, Orientation):
            return value
        if isinstance(value, str) and value.strip().lower() == "black":
            return cls.BLACK
        return cls.WHITE

    def __str__(self) -> str:
        return self.value


class MoveOutcome(Enum):
    """Classification of a drop attempt."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    IGNORED = "ignored"

    def __str__(self) -> str:
        return self.value
