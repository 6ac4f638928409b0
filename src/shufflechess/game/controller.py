"""GameController — the central orchestrator of a game.

Coordinates GameState and the move generator for a presentation layer:
selection highlighting, move submission, undo.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from shufflechess.core.enums import GameResult, PieceType
from shufflechess.core.position import Position
from shufflechess.core.roles import RoleMap
from shufflechess.core.types import Square
from shufflechess.game.config import GameConfig
from shufflechess.game.interfaces import GamePhase, IGameController
from shufflechess.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
PromotionCallback = Callable[[Square, PieceType], None]  # square, chosen role
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_promotion: list[PromotionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, switches turns, notifies
    listeners.

    Promotion is decided once, by the move executor. Listeners learn the
    chosen role through ``on_promotion`` and must not pick another.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        config: GameConfig | None = None,
        roles: RoleMap | None = None,
        position: Position | None = None,
    ) -> None:
        self._state = GameState()
        self._state.setup(config, roles, position)
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
        else:
            self._emit_phase(GamePhase.AWAITING_MOVE)

    def select(self, sq: Square) -> list[Square]:
        if self._state.is_game_over:
            return []
        piece = self._state.position.board.get(sq)
        if piece is None or piece.color != self._state.side_to_move:
            return []
        return self._state.legal_moves(sq)

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return False

        # Validate legality
        if not self._state.is_legal_move(from_sq, to_sq):
            _LOGGER.debug("Rejected illegal move %s-%s", from_sq, to_sq)
            return False

        # Apply
        record = self._state.apply_move(from_sq, to_sq)

        # Notify listeners
        self._emit_move(record)
        if record.promotion is not None:
            self._emit_promotion(to_sq, record.promotion)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
        return True

    def undo_move(self) -> bool:
        if self._state.undo_last_move() is None:
            return False
        self._emit_phase(GamePhase.AWAITING_MOVE)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_promotion(self, sq: Square, role: PieceType) -> None:
        for cb in self.events.on_promotion:
            cb(sq, role)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
