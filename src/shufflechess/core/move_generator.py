"""Per-role move generation, attack detection and the legality filter."""

from __future__ import annotations

from shufflechess.core.board import Board
from shufflechess.core.enums import CastlingRights, Color, PieceType
from shufflechess.core.piece import Piece
from shufflechess.core.position import apply_move
from shufflechess.core.roles import RoleMap
from shufflechess.core.types import Square, is_valid_square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


def pawn_direction(color: Color) -> int:
    """Row step of a forward pawn move: white heads to row 0, black to row 7."""
    return -1 if color == Color.WHITE else 1


def pawn_start_row(color: Color) -> int:
    return 6 if color == Color.WHITE else 1


def promotion_row(color: Color) -> int:
    return 0 if color == Color.WHITE else 7


def en_passant_row(color: Color) -> int:
    """Row a pawn must stand on to capture en passant."""
    return 3 if color == Color.WHITE else 4


def home_row(color: Color) -> int:
    return 7 if color == Color.WHITE else 0


class MoveGenerator:
    """Generates moves for pieces on *board* under a given role map.

    Destinations are plain :class:`Square` values; the executor works out
    castling, en passant and promotion from the geometry of the move.

    Two modes are exposed:

    * :meth:`legal_moves` filters pseudo-legal moves by simulating each one
      and rejecting those that leave the mover's king attacked.
    * :meth:`attacks` never filters. Check detection is built on it, so
      asking whether a king is attacked never recurses into the opponent's
      own check-safety.
    """

    __slots__ = ("_board", "_roles", "_en_passant", "_castling")

    def __init__(
        self,
        board: Board,
        roles: RoleMap,
        en_passant: Square | None = None,
        castling: CastlingRights = CastlingRights.ALL,
    ) -> None:
        self._board = board
        self._roles = roles
        self._en_passant = en_passant
        self._castling = castling

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square) -> list[Square]:
        """Destinations from *sq* that do not leave the mover in check."""
        piece = self._board.get(sq)
        if piece is None:
            return []

        legal: list[Square] = []
        for to_sq in self.pseudo_legal_moves(sq):
            result = apply_move(
                self._board,
                sq,
                to_sq,
                self._castling,
                self._en_passant,
                self._roles,
            )
            after = MoveGenerator(result.board, self._roles)
            if not after.is_in_check(piece.color):
                legal.append(to_sq)
        return legal

    def is_legal_move(self, from_sq: Square, to_sq: Square, color: Color) -> bool:
        """Whether *color* may move the piece on *from_sq* to *to_sq*."""
        piece = self._board.get(from_sq)
        if piece is None or piece.color != color:
            return False
        return to_sq in self.legal_moves(from_sq)

    def has_any_legal_move(self, color: Color) -> bool:
        return any(self.legal_moves(sq) for sq in self._board.all_pieces(color))

    def pseudo_legal_moves(self, sq: Square) -> list[Square]:
        """Moves consistent with the piece's role, ignoring own-king safety."""
        return self._generate(sq, with_specials=True)

    def attacks(self, sq: Square) -> list[Square]:
        """Non-filtering mode used for check detection.

        Same as :meth:`pseudo_legal_moves` minus castling and en passant,
        neither of which can capture a king.
        """
        return self._generate(sq, with_specials=False)

    # -- Attack detection ---------------------------------------------------

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* reachable by any piece of *by_color*?"""
        for from_sq in self._board.all_pieces(by_color):
            if sq in self.attacks(from_sq):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    # -- Dispatch -----------------------------------------------------------

    def _generate(self, sq: Square, *, with_specials: bool) -> list[Square]:
        piece = self._board.get(sq)
        if piece is None:
            return []

        role = self._roles[piece.piece_type]
        moves: list[Square] = []
        if role == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves, with_specials)
        elif role == PieceType.KNIGHT:
            self._gen_steps(sq, piece.color, KNIGHT_OFFSETS, moves)
        elif role == PieceType.BISHOP:
            self._gen_sliding(sq, piece.color, BISHOP_DIRS, moves)
        elif role == PieceType.ROOK:
            self._gen_sliding(sq, piece.color, ROOK_DIRS, moves)
        elif role == PieceType.QUEEN:
            self._gen_sliding(sq, piece.color, QUEEN_DIRS, moves)
        else:
            self._gen_steps(sq, piece.color, KING_OFFSETS, moves)
            if with_specials:
                self._gen_castling(sq, piece.color, moves)
        return moves

    # -- Role-specific generators (private) ---------------------------------

    def _gen_pawn(
        self,
        sq: Square,
        color: Color,
        moves: list[Square],
        with_en_passant: bool,
    ) -> None:
        board = self._board
        step = pawn_direction(color)

        one_step = sq.offset(step, 0)
        if is_valid_square(one_step) and board.is_empty(one_step):
            moves.append(one_step)
            two_step = sq.offset(2 * step, 0)
            if sq.row == pawn_start_row(color) and board.is_empty(two_step):
                moves.append(two_step)

        for d_col in (-1, 1):
            cap_sq = sq.offset(step, d_col)
            if not is_valid_square(cap_sq):
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                moves.append(cap_sq)

        ep = self._en_passant
        if (
            with_en_passant
            and ep is not None
            and sq.row == en_passant_row(color)
            and ep.row == sq.row + step
            and abs(ep.col - sq.col) == 1
            and board.get(ep) is None
        ):
            moves.append(ep)

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if not is_valid_square(to_sq):
                continue
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in directions:
            to_sq = sq.offset(d_row, d_col)
            while is_valid_square(to_sq):
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    to_sq = to_sq.offset(d_row, d_col)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Square]) -> None:
        row = king_sq.row
        if row != home_row(color):
            return

        board = self._board
        rook = Piece(color, PieceType.ROOK)

        if self._castling & CastlingRights.kingside(color):
            between = [Square(row, c) for c in range(king_sq.col + 1, 7)]
            if (
                len(between) == 2
                and all(board.is_empty(s) for s in between)
                and board[Square(row, 7)] == rook
            ):
                moves.append(Square(row, king_sq.col + 2))

        if self._castling & CastlingRights.queenside(color):
            between = [Square(row, c) for c in range(1, king_sq.col)]
            if (
                len(between) == 3
                and all(board.is_empty(s) for s in between)
                and board[Square(row, 0)] == rook
            ):
                moves.append(Square(row, king_sq.col - 2))


# -- Functional entry points ------------------------------------------------


def get_legal_moves(
    board: Board,
    sq: Square,
    roles: RoleMap,
    en_passant: Square | None = None,
    castling: CastlingRights = CastlingRights.ALL,
) -> list[Square]:
    """Legal destinations for the piece on *sq*; empty for an empty square."""
    return MoveGenerator(board, roles, en_passant, castling).legal_moves(sq)


def is_legal_move(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    color: Color,
    roles: RoleMap,
    en_passant: Square | None = None,
    castling: CastlingRights = CastlingRights.ALL,
) -> bool:
    return MoveGenerator(board, roles, en_passant, castling).is_legal_move(
        from_sq, to_sq, color
    )


def is_check(board: Board, color: Color, roles: RoleMap) -> bool:
    """Is *color*'s king attacked on *board*?"""
    return MoveGenerator(board, roles).is_in_check(color)
