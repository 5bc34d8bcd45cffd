"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import Enum, IntEnum

import chess


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def back_rank(self) -> int:
        """Rank number (1–8) a pawn of this color promotes on."""
        return 8 if self is Color.WHITE else 1

    @classmethod
    def from_chess(cls, color: chess.Color) -> Color:
        return cls.WHITE if color == chess.WHITE else cls.BLACK

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types, numbered like python-chess piece types."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def symbol(self) -> str:
        """Lowercase letter, e.g. ``q``."""
        return chess.piece_symbol(int(self))

    @classmethod
    def from_symbol(cls, symbol: str) -> PieceType:
        try:
            return cls(chess.PIECE_SYMBOLS.index(symbol.lower()))
        except ValueError:
            raise ValueError(f"Invalid piece symbol: {symbol!r}") from None


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class ValidationMode(Enum):
    """How the rules engine's verdicts are treated for a board session.

    ``STRICT``: the engine is ground truth and rejections propagate.
    ``PERMISSIVE``: rejections are coerced to safe defaults.
    """

    STRICT = "strict"
    PERMISSIVE = "permissive"

    @property
    def is_permissive(self) -> bool:
        return self is ValidationMode.PERMISSIVE
