"""Role assignment — which movement behaviour each piece type uses this game.

A piece keeps its displayed type for the whole game, but moves according to
the role its type is mapped to. The king is always a king; the other five
types are dealt a random permutation of the five non-king roles.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator, Mapping

from shufflechess.core.enums import PieceType

_LOGGER = logging.getLogger(__name__)

NON_KING_TYPES: tuple[PieceType, ...] = (
    PieceType.PAWN,
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
)

PROMOTION_ROLES: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
)

# Shared fallback generator; pass an explicit ``random.Random`` for
# reproducible games.
_DEFAULT_RNG = random.Random()


class RoleMap(Mapping[PieceType, PieceType]):
    """Immutable mapping: displayed piece type → movement role."""

    __slots__ = ("_roles", "_types_by_role")

    def __init__(self, roles: Mapping[PieceType, PieceType]) -> None:
        table = {PieceType(k): PieceType(v) for k, v in roles.items()}
        table.setdefault(PieceType.KING, PieceType.KING)
        if table[PieceType.KING] != PieceType.KING:
            raise ValueError("The king must keep the king role")
        if set(table) != set(PieceType):
            missing = sorted(str(pt) for pt in set(PieceType) - set(table))
            raise ValueError(f"Role map is missing types: {', '.join(missing)}")
        if set(table.values()) != set(PieceType):
            raise ValueError("Roles must be a permutation of the piece types")
        self._roles = table
        self._types_by_role = {role: pt for pt, role in table.items()}

    # ── Mapping protocol ─────────────────────────────────────────────────

    def __getitem__(self, piece_type: PieceType) -> PieceType:
        return self._roles[piece_type]

    def __iter__(self) -> Iterator[PieceType]:
        return iter(self._roles)

    def __len__(self) -> int:
        return len(self._roles)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RoleMap):
            return self._roles == other._roles
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._roles.items())))

    def __repr__(self) -> str:
        pairs = ", ".join(
            f"{pt}→{role}" for pt, role in sorted(self._roles.items())
        )
        return f"RoleMap({pairs})"

    # ── Lookups ──────────────────────────────────────────────────────────

    def role_of(self, piece_type: PieceType) -> PieceType:
        """Movement role used by pieces displayed as *piece_type*."""
        return self._roles[piece_type]

    def type_for_role(self, role: PieceType) -> PieceType:
        """Displayed type whose pieces move as *role* (inverse lookup)."""
        return self._types_by_role[role]

    @property
    def is_standard(self) -> bool:
        return all(pt == role for pt, role in self._roles.items())

    @classmethod
    def standard(cls) -> RoleMap:
        """Identity mapping: ordinary chess."""
        return cls({pt: pt for pt in PieceType})


def assign_roles(rng: random.Random | None = None) -> RoleMap:
    """Deal a uniformly random permutation of the non-king roles.

    ``random.Random.shuffle`` is a Fisher–Yates shuffle, so every one of the
    120 permutations is equally likely.
    """
    rng = rng if rng is not None else _DEFAULT_RNG
    shuffled = list(NON_KING_TYPES)
    rng.shuffle(shuffled)
    roles = RoleMap(dict(zip(NON_KING_TYPES, shuffled)))
    _LOGGER.debug("Assigned roles: %r", roles)
    return roles


def choose_promotion_role(rng: random.Random | None = None) -> PieceType:
    """Random role for a promoting pawn: rook, knight, bishop or queen."""
    rng = rng if rng is not None else _DEFAULT_RNG
    return rng.choice(PROMOTION_ROLES)
