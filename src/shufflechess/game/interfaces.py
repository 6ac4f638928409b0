"""Abstract interfaces for the game layer.

A presentation layer depends on :class:`IGameController`, not on the concrete
controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shufflechess.core.position import Position
    from shufflechess.core.roles import RoleMap
    from shufflechess.core.types import Square
    from shufflechess.game.config import GameConfig


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        config: GameConfig | None = None,
        roles: RoleMap | None = None,
        position: Position | None = None,
    ) -> None:
        """Set up a new game, optionally from a custom *position*."""

    @abstractmethod
    def select(self, sq: Square) -> list[Square]:
        """Legal destinations for the side to move's piece on *sq*."""

    @abstractmethod
    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
