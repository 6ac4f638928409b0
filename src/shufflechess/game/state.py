"""Game state machine — tracks phase transitions and move history."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from shufflechess.core.enums import Color, GameEndReason, GameResult, PieceType
from shufflechess.core.move_generator import MoveGenerator
from shufflechess.core.piece import Piece
from shufflechess.core.position import Position
from shufflechess.core.roles import RoleMap
from shufflechess.core.rules import Rules
from shufflechess.core.types import Square
from shufflechess.game.config import GameConfig
from shufflechess.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    promotion: PieceType | None = None
    was_check: bool = False
    position_before: Position = field(default_factory=Position, repr=False)
    rng_state: tuple[object, ...] | None = field(default=None, repr=False)


@dataclass
class GameState:
    """Manages game lifecycle: roles, phase, result, move history.

    This is a pure data/logic class — no threading, no UI. Each game owns
    its own random generator so games never share state.
    """

    position: Position = field(default_factory=Position.initial, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    end_reason: GameEndReason = field(default=GameEndReason.NONE, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    config: GameConfig = field(default_factory=GameConfig, init=False)
    rng: random.Random = field(default_factory=random.Random, init=False, repr=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        config: GameConfig | None = None,
        roles: RoleMap | None = None,
        position: Position | None = None,
    ) -> None:
        """Initialise (or reset) the game. Roles are dealt exactly once here.

        A custom *position* starts the game from that state and keeps its
        roles; otherwise the standard layout is used with *roles*, or with
        roles dealt from the config.
        """
        self.config = config if config is not None else GameConfig()
        self.rng = self.config.make_rng()
        if position is None:
            if roles is None:
                roles = self.config.make_roles(self.rng)
            position = Position.initial(roles)
        self.position = position
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = GameEndReason.NONE
        self.move_history.clear()
        _LOGGER.debug("New game with %r", self.position.roles)

        # A custom start may already be decided
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        before = self.position
        piece = before.board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        rng_state = self.rng.getstate()
        self.position, outcome = before.play(from_sq, to_sq, self.rng)

        record = MoveRecord(
            from_sq=from_sq,
            to_sq=to_sq,
            piece=piece,
            captured=outcome.captured,
            promotion=outcome.promotion,
            was_check=Rules.is_in_check(self.position),
            position_before=before,
            rng_state=rng_state,
        )
        self.move_history.append(record)

        # Check for game-ending conditions
        self._check_game_over()
        return record

    def undo_last_move(self) -> MoveRecord | None:
        """Undo the last move. Returns its record, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.position = record.position_before
        if record.rng_state is not None:
            self.rng.setstate(record.rng_state)

        # Reset result if we un-did a game-ending move
        if self.result != GameResult.IN_PROGRESS:
            self.result = GameResult.IN_PROGRESS
            self.end_reason = GameEndReason.NONE
            self.phase = GamePhase.AWAITING_MOVE

        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def roles(self) -> RoleMap:
        return self.position.roles

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def is_in_check(self) -> bool:
        return Rules.is_in_check(self.position)

    @property
    def winner(self) -> Color | None:
        if self.result == GameResult.WHITE_WINS:
            return Color.WHITE
        if self.result == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def legal_moves(self, sq: Square) -> list[Square]:
        """Legal destinations from *sq* in the current position."""
        pos = self.position
        gen = MoveGenerator(pos.board, pos.roles, pos.en_passant, pos.castling)
        return gen.legal_moves(sq)

    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        pos = self.position
        gen = MoveGenerator(pos.board, pos.roles, pos.en_passant, pos.castling)
        return gen.is_legal_move(from_sq, to_sq, pos.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.position)
        if result == GameResult.IN_PROGRESS:
            return
        self.result = result
        self.end_reason = (
            GameEndReason.STALEMATE
            if result == GameResult.DRAW
            else GameEndReason.CHECKMATE
        )
        self.phase = GamePhase.GAME_OVER
        _LOGGER.info(
            "Game over after %d plies: %s", self.ply_count, self.end_reason.name
        )
