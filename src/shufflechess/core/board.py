"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from shufflechess.core.enums import Color, PieceType
from shufflechess.core.piece import Piece
from shufflechess.core.types import ALL_SQUARES, BOARD_SIZE, Square, is_valid_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """64-square grid of ``Piece | None``.

    Item assignment exists for building positions. Engine code never
    assigns into a board it was handed; it works on :meth:`copy`.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq.index] = piece

    def get(self, sq: Square) -> Piece | None:
        """Bounds-checked lookup; off-board squares read as empty."""
        if not is_valid_square(sq):
            return None
        return self._squares[sq.index]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is not None:
                yield sq, piece

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None when it is not on the board."""
        for sq, piece in self.occupied():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return sq
        return None

    def piece_count(self) -> int:
        return sum(1 for _ in self.occupied())

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (black on rows 0–1, white on rows 6–7)."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_diagram(cls, text: str) -> Board:
        """Parse an 8-line diagram, row 0 first.

        Each line holds eight tokens: a piece letter or ``.`` for an empty
        square. Whitespace between tokens and a leading rank number are
        optional, so ``repr(board)`` output round-trips.
        """
        lines = [line.strip() for line in text.strip().splitlines()]
        lines = [line for line in lines if line and not line.startswith("a ")]
        if len(lines) != BOARD_SIZE:
            raise ValueError(f"Diagram needs {BOARD_SIZE} rows, got {len(lines)}")

        b = cls()
        for row, line in enumerate(lines):
            tokens = line.replace(" ", "")
            if tokens[:1].isdigit():
                tokens = tokens[1:]
            if len(tokens) != BOARD_SIZE:
                raise ValueError(f"Row {row} needs {BOARD_SIZE} squares: {line!r}")
            for col, char in enumerate(tokens):
                if char != ".":
                    b[Square(row, col)] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self[Square(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def initialize_board() -> Board:
    """Fresh board in the standard starting layout."""
    return Board.initial()
