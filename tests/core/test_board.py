"""Tests for Board."""

import pytest

from chessboard.core.board import Board
from chessboard.core.enums import Color, PieceType
from chessboard.core.piece import Piece

WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
BLACK_QUEEN = Piece(Color.BLACK, PieceType.QUEEN)


class TestBoardInitial:
    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for col, pt in enumerate(expected):
            assert board[0, col] == Piece(Color.BLACK, pt), f"Mismatch at column {col}"
            assert board[7, col] == Piece(Color.WHITE, pt), f"Mismatch at column {col}"

    def test_piece_count(self) -> None:
        assert len(Board.initial()) == 32

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board.is_empty((row, col))


class TestBoardMutation:
    def test_set_and_get(self) -> None:
        board = Board()
        board[4, 4] = WHITE_PAWN
        assert board[4, 4] == WHITE_PAWN
        board[4, 4] = None
        assert board.is_empty((4, 4))

    def test_move_piece_overwrites_target(self) -> None:
        board = Board()
        board[6, 4] = WHITE_PAWN
        board[4, 4] = BLACK_QUEEN
        board.move_piece((6, 4), (4, 4))
        assert board[6, 4] is None
        assert board[4, 4] == WHITE_PAWN
        assert len(board) == 1

    def test_move_piece_onto_itself(self) -> None:
        board = Board()
        board[6, 4] = WHITE_PAWN
        board.move_piece((6, 4), (6, 4))
        assert board[6, 4] == WHITE_PAWN

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone[0, 0] = None
        assert board[0, 0] is not None
        assert clone != board

    def test_rows_is_a_copy(self) -> None:
        board = Board.initial()
        rows = board.rows()
        rows[0][0] = None
        assert board[0, 0] is not None

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board == Board()

    @pytest.mark.parametrize("coords", [(-1, 0), (8, 0), (0, 8)])
    def test_out_of_range(self, coords: tuple[int, int]) -> None:
        with pytest.raises(IndexError):
            Board()[coords]


class TestBoardConstruction:
    def test_from_rows(self) -> None:
        rows = Board.initial().rows()
        assert Board(rows) == Board.initial()

    def test_wrong_shape(self) -> None:
        with pytest.raises(ValueError, match="8 rows"):
            Board([[None] * 8] * 7)
        with pytest.raises(ValueError, match="8 rows"):
            Board([[None] * 7] * 8)

    def test_invalid_cell(self) -> None:
        rows = [[None] * 8 for _ in range(8)]
        rows[0][0] = "K"
        with pytest.raises(ValueError, match="Invalid board cell"):
            Board(rows)

    def test_occupied_order(self) -> None:
        cells = list(Board.initial().occupied())
        assert cells[0][0] == (0, 0)
        assert cells[-1][0] == (7, 7)
