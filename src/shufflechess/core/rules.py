"""High-level rules: check, checkmate, stalemate and the game result."""

from __future__ import annotations

from shufflechess.core.board import Board
from shufflechess.core.enums import CastlingRights, Color, GameEndReason, GameResult
from shufflechess.core.move_generator import MoveGenerator
from shufflechess.core.position import Position
from shufflechess.core.roles import RoleMap
from shufflechess.core.types import Square


def _generator(position: Position) -> MoveGenerator:
    return MoveGenerator(
        position.board, position.roles, position.en_passant, position.castling
    )


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Only checkmate and stalemate end a game; there are no draw claims.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return _generator(position).is_in_check(position.side_to_move)

    @staticmethod
    def has_any_legal_move(position: Position) -> bool:
        return _generator(position).has_any_legal_move(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not Rules.has_any_legal_move(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not Rules.has_any_legal_move(position)

    @staticmethod
    def end_reason(position: Position) -> GameEndReason:
        gen = _generator(position)
        if gen.has_any_legal_move(position.side_to_move):
            return GameEndReason.NONE
        if gen.is_in_check(position.side_to_move):
            return GameEndReason.CHECKMATE
        return GameEndReason.STALEMATE

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the result for the side about to move."""
        reason = Rules.end_reason(position)
        if reason == GameEndReason.CHECKMATE:
            return (
                GameResult.BLACK_WINS
                if position.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if reason == GameEndReason.STALEMATE:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS


# -- Functional entry points ------------------------------------------------


def is_checkmate(
    board: Board,
    color: Color,
    roles: RoleMap,
    en_passant: Square | None = None,
    castling: CastlingRights = CastlingRights.ALL,
) -> bool:
    gen = MoveGenerator(board, roles, en_passant, castling)
    return gen.is_in_check(color) and not gen.has_any_legal_move(color)


def is_stalemate(
    board: Board,
    color: Color,
    roles: RoleMap,
    en_passant: Square | None = None,
    castling: CastlingRights = CastlingRights.ALL,
) -> bool:
    gen = MoveGenerator(board, roles, en_passant, castling)
    return not gen.is_in_check(color) and not gen.has_any_legal_move(color)


def has_any_legal_move(
    board: Board,
    color: Color,
    roles: RoleMap,
    en_passant: Square | None = None,
    castling: CastlingRights = CastlingRights.ALL,
) -> bool:
    return MoveGenerator(board, roles, en_passant, castling).has_any_legal_move(color)
