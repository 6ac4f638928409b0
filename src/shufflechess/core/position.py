"""Position — complete game state, and the move executor that advances it."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from shufflechess.core.board import Board
from shufflechess.core.enums import CastlingRights, Color, PieceType
from shufflechess.core.piece import Piece
from shufflechess.core.roles import RoleMap, choose_promotion_role
from shufflechess.core.types import Square

_LOGGER = logging.getLogger(__name__)

# Corner square → the right lost when anything leaves or lands on it.
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    Square(7, 0): CastlingRights.WHITE_QUEENSIDE,
    Square(7, 7): CastlingRights.WHITE_KINGSIDE,
    Square(0, 0): CastlingRights.BLACK_QUEENSIDE,
    Square(0, 7): CastlingRights.BLACK_KINGSIDE,
}


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Everything a move changed.

    ``promotion`` is the role the executor chose for a promoting pawn, or
    None. It is the only promotion decision made for the move.
    """

    board: Board
    en_passant: Square | None
    castling: CastlingRights
    promotion: PieceType | None = None
    captured: Piece | None = None


def apply_move(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    castling: CastlingRights,
    en_passant: Square | None,
    roles: RoleMap,
    rng: random.Random | None = None,
) -> MoveResult:
    """Apply an already-validated move and return the new state.

    The input board is never modified. Passing a move that was not
    validated gives an unspecified (but contained) result.
    """
    new_board = board.copy()
    piece = new_board[from_sq]
    captured = new_board[to_sq]
    if piece is None:
        return MoveResult(new_board, None, castling)

    role = roles[piece.piece_type]
    next_en_passant: Square | None = None

    if role == PieceType.PAWN:
        # En passant: the captured pawn sits beside the origin, not on to_sq
        if (
            to_sq.col != from_sq.col
            and captured is None
            and en_passant is not None
            and to_sq == en_passant
        ):
            ep_capture_sq = Square(from_sq.row, to_sq.col)
            captured = new_board[ep_capture_sq]
            new_board[ep_capture_sq] = None
        if abs(to_sq.row - from_sq.row) == 2:
            next_en_passant = Square((from_sq.row + to_sq.row) // 2, from_sq.col)

    new_board[to_sq] = piece
    new_board[from_sq] = None

    promotion: PieceType | None = None
    far_row = 0 if piece.color == Color.WHITE else 7
    if role == PieceType.PAWN and to_sq.row == far_row:
        promotion = choose_promotion_role(rng)
        new_board[to_sq] = Piece(piece.color, roles.type_for_role(promotion))

    # Slide the corner piece across the king for castling
    if role == PieceType.KING and abs(to_sq.col - from_sq.col) == 2:
        if to_sq.col > from_sq.col:
            rook_from, rook_to = Square(to_sq.row, 7), Square(to_sq.row, to_sq.col - 1)
        else:
            rook_from, rook_to = Square(to_sq.row, 0), Square(to_sq.row, to_sq.col + 1)
        new_board[rook_to] = new_board[rook_from]
        new_board[rook_from] = None

    return MoveResult(
        board=new_board,
        en_passant=next_en_passant,
        castling=_update_castling(castling, piece, role, from_sq, to_sq),
        promotion=promotion,
        captured=captured,
    )


def _update_castling(
    castling: CastlingRights,
    piece: Piece,
    role: PieceType,
    from_sq: Square,
    to_sq: Square,
) -> CastlingRights:
    next_castling = castling
    if role == PieceType.KING:
        next_castling &= ~CastlingRights.both(piece.color)

    for sq in (from_sq, to_sq):
        if sq in _ROOK_CORNERS:
            next_castling &= ~_ROOK_CORNERS[sq]
    return next_castling


@dataclass(frozen=True, slots=True)
class Position:
    """Full game state: board, side to move, roles, castling, en passant.

    Immutable: :meth:`play` returns a new position, so keeping history is a
    matter of keeping references.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    roles: RoleMap = field(default_factory=RoleMap.standard)
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None

    @classmethod
    def initial(cls, roles: RoleMap | None = None) -> Position:
        """Starting position with full castling rights and no en passant."""
        return cls(roles=roles if roles is not None else RoleMap.standard())

    def play(
        self,
        from_sq: Square,
        to_sq: Square,
        rng: random.Random | None = None,
    ) -> tuple[Position, MoveResult]:
        """Apply a validated move; return the next position and the details."""
        result = apply_move(
            self.board,
            from_sq,
            to_sq,
            self.castling,
            self.en_passant,
            self.roles,
            rng,
        )
        _LOGGER.debug(
            "%s played %s-%s (promotion=%s)",
            self.side_to_move,
            from_sq,
            to_sq,
            result.promotion,
        )
        next_position = Position(
            board=result.board,
            side_to_move=self.side_to_move.opposite,
            roles=self.roles,
            castling=result.castling,
            en_passant=result.en_passant,
        )
        return next_position, result
