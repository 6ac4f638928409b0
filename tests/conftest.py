"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random

import pytest

from shufflechess.core.enums import PieceType
from shufflechess.core.roles import RoleMap


@pytest.fixture
def standard_roles() -> RoleMap:
    """Ordinary chess: every type moves as itself."""
    return RoleMap.standard()


@pytest.fixture
def swapped_roles() -> RoleMap:
    """Bishops move like knights and knights like bishops."""
    return RoleMap(
        {
            PieceType.PAWN: PieceType.PAWN,
            PieceType.ROOK: PieceType.ROOK,
            PieceType.KNIGHT: PieceType.BISHOP,
            PieceType.BISHOP: PieceType.KNIGHT,
            PieceType.QUEEN: PieceType.QUEEN,
        }
    )


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for reproducible shuffles and promotions."""
    return random.Random(1234)
