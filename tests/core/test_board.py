"""Tests for Board and square helpers."""

import pytest

from shufflechess.core.board import Board, initialize_board
from shufflechess.core.enums import Color, PieceType
from shufflechess.core.piece import Piece
from shufflechess.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4,
    ALL_SQUARES,
    Square,
    is_valid_square,
    parse_square,
    square_name,
)


class TestSquares:
    def test_named_constants(self) -> None:
        assert E1 == Square(7, 4)
        assert E8 == Square(0, 4)
        assert A1 == Square(7, 0)
        assert H8 == Square(0, 7)

    def test_parse_square(self) -> None:
        assert parse_square("e4") == E4
        assert parse_square("a8") == Square(0, 0)

    def test_square_name(self) -> None:
        assert square_name(Square(7, 4)) == "e1"
        assert str(Square(0, 7)) == "h8"

    @pytest.mark.parametrize("name", ["", "e9", "i1", "e", "e10"])
    def test_parse_invalid_raises(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_validity(self) -> None:
        assert is_valid_square(Square(0, 0))
        assert is_valid_square(Square(7, 7))
        assert not is_valid_square(Square(-1, 3))
        assert not is_valid_square(Square(3, 8))


class TestPiece:
    def test_letters(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"

    def test_from_char_round_trip(self) -> None:
        for color in Color:
            for pt in PieceType:
                piece = Piece(color, pt)
                assert Piece.from_char(str(piece)) == piece


class TestBoardInitial:
    def test_factory_function(self) -> None:
        assert initialize_board() == Board.initial()

    def test_king_positions(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert board[Square(6, col)] == Piece(Color.WHITE, PieceType.PAWN)
            assert board[Square(1, col)] == Piece(Color.BLACK, PieceType.PAWN)

    def test_piece_counts(self) -> None:
        board = Board.initial()
        assert board.piece_count() == 32
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in ALL_SQUARES:
            if 2 <= sq.row <= 5:
                assert board[sq] is None


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_get_off_board_is_empty(self) -> None:
        board = Board.initial()
        assert board.get(Square(8, 0)) is None
        assert board.get(Square(0, -1)) is None

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == E1
        assert board.find_king(Color.BLACK) == E8

    def test_find_king_missing_returns_none(self) -> None:
        assert Board().find_king(Color.WHITE) is None


class TestDiagram:
    def test_repr_round_trip(self) -> None:
        board = Board.initial()
        assert Board.from_diagram(repr(board)) == board

    def test_compact_rows(self) -> None:
        board = Board.from_diagram(
            """
            ....k...
            ........
            ........
            ........
            ........
            ........
            ........
            R...K...
            """
        )
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)
        assert board[A1] == Piece(Color.WHITE, PieceType.ROOK)
        assert board.piece_count() == 3

    def test_wrong_row_count_raises(self) -> None:
        with pytest.raises(ValueError, match="needs 8 rows"):
            Board.from_diagram("........\n........")

    def test_bad_letter_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Board.from_diagram("\n".join(["x......."] + ["........"] * 7))

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert "K" in text
        assert "a b c d e f g h" in text
