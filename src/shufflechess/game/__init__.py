"""Game management layer — configuration, controller, state machine.

Quick start::

    from shufflechess.core import parse_square
    from shufflechess.game import GameConfig, GameController

    ctrl = GameController()
    ctrl.new_game(GameConfig(seed=42))
    ctrl.select(parse_square("e2"))
    ctrl.submit_move(parse_square("e2"), parse_square("e4"))
"""

from shufflechess.game.config import GameConfig
from shufflechess.game.controller import GameController, GameEvents
from shufflechess.game.interfaces import GamePhase, IGameController
from shufflechess.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameConfig",
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
