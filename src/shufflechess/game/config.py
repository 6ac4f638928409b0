"""Per-game configuration."""

from __future__ import annotations

import random
from dataclasses import dataclass

from shufflechess.core.roles import RoleMap, assign_roles


@dataclass(frozen=True)
class GameConfig:
    """User-configurable options for a new game."""

    # Randomness: None draws a fresh seed from the OS.
    seed: int | None = None

    # Rules: False plays ordinary chess roles (useful for testing).
    shuffle_roles: bool = True

    def make_rng(self) -> random.Random:
        """Generator owned by one game; seeded games replay identically."""
        return random.Random(self.seed)

    def make_roles(self, rng: random.Random) -> RoleMap:
        if not self.shuffle_roles:
            return RoleMap.standard()
        return assign_roles(rng)
