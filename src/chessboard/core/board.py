"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from chessboard.core.enums import Color, PieceType
from chessboard.core.piece import Piece
from chessboard.core.types import Coords

_SIZE = 8

Grid = list[list[Piece | None]]

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces, indexed by ``board[row, col]``.

    Row 0 is rank 8 and column 0 is file a, matching the order in which
    board notation lists its cells.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Sequence[Sequence[Piece | None]] | None = None) -> None:
        if rows is None:
            self._rows: Grid = [[None] * _SIZE for _ in range(_SIZE)]
            return
        if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
            raise ValueError("Board must have exactly 8 rows of 8 cells")
        for row in rows:
            for cell in row:
                if cell is not None and not isinstance(cell, Piece):
                    raise ValueError(f"Invalid board cell: {cell!r}")
        self._rows = [list(row) for row in rows]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coords: tuple[int, int]) -> Piece | None:
        row, col = self._check(coords)
        return self._rows[row][col]

    def __setitem__(self, coords: tuple[int, int], piece: Piece | None) -> None:
        row, col = self._check(coords)
        self._rows[row][col] = piece

    def is_empty(self, coords: tuple[int, int]) -> bool:
        return self[coords] is None

    @staticmethod
    def _check(coords: tuple[int, int]) -> Coords:
        row, col = coords
        if not (0 <= row < _SIZE and 0 <= col < _SIZE):
            raise IndexError(f"Grid coordinates out of range: ({row}, {col})")
        return Coords(row, col)

    # -- Query helpers ------------------------------------------------------

    def rows(self) -> Grid:
        """Copy of the grid as nested lists."""
        return [row.copy() for row in self._rows]

    def occupied(self) -> Iterator[tuple[Coords, Piece]]:
        """Yield every occupied cell in row-major order."""
        for r, row in enumerate(self._rows):
            for c, piece in enumerate(row):
                if piece is not None:
                    yield Coords(r, c), piece

    def __len__(self) -> int:
        """Number of pieces on the board."""
        return sum(1 for _ in self.occupied())

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, source: tuple[int, int], target: tuple[int, int]) -> None:
        """Move the piece on *source* to *target*, replacing whatever was there."""
        piece = self[source]
        self[source] = None
        self[target] = piece

    def copy(self) -> Board:
        b = Board()
        b._rows = self.rows()
        return b

    def clear(self) -> None:
        self._rows = [[None] * _SIZE for _ in range(_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout."""
        b = cls()
        for c, pt in enumerate(_BACK_RANK):
            b[0, c] = Piece(Color.BLACK, pt)
            b[1, c] = Piece(Color.BLACK, PieceType.PAWN)
            b[6, c] = Piece(Color.WHITE, PieceType.PAWN)
            b[7, c] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        lines = [" ".join(str(p) if p else "." for p in row) for row in self._rows]
        return "\n".join(lines)
