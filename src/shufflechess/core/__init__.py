"""Core domain layer — pure shuffled-roles chess logic, no external dependencies.

Quick start::

    import random

    from shufflechess.core import Position, MoveGenerator, assign_roles, parse_square

    pos = Position.initial(assign_roles(random.Random(7)))
    gen = MoveGenerator(pos.board, pos.roles, pos.en_passant, pos.castling)
    print(gen.legal_moves(parse_square("e2")))
"""

from shufflechess.core.board import Board, initialize_board
from shufflechess.core.enums import (
    CastlingRights,
    Color,
    GameEndReason,
    GameResult,
    PieceType,
)
from shufflechess.core.move_generator import (
    MoveGenerator,
    get_legal_moves,
    is_check,
    is_legal_move,
)
from shufflechess.core.piece import Piece
from shufflechess.core.position import MoveResult, Position, apply_move
from shufflechess.core.roles import RoleMap, assign_roles, choose_promotion_role
from shufflechess.core.rules import (
    Rules,
    has_any_legal_move,
    is_checkmate,
    is_stalemate,
)
from shufflechess.core.types import (
    Square,
    is_valid_square,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameEndReason",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveGenerator",
    "MoveResult",
    "Piece",
    "Position",
    "RoleMap",
    "Rules",
    # Functional API
    "apply_move",
    "assign_roles",
    "choose_promotion_role",
    "get_legal_moves",
    "has_any_legal_move",
    "initialize_board",
    "is_check",
    "is_checkmate",
    "is_legal_move",
    "is_stalemate",
]
