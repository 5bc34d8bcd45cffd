"""MoveRecord value object — what the board reports for a played move."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from chesswidget.core.enums import Color, PieceType
from chesswidget.core.types import Square

# Flag letters, one per applicable property of the move.
FLAG_NORMAL = "n"
FLAG_BIG_PAWN = "b"
FLAG_EN_PASSANT = "e"
FLAG_CAPTURE = "c"
FLAG_PROMOTION = "p"
FLAG_KINGSIDE_CASTLE = "k"
FLAG_QUEENSIDE_CASTLE = "q"


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Immutable description of a move, including notation and positions.

    ``before`` / ``after`` are FEN strings of the engine position around the
    move.  ``synthetic`` marks a record fabricated without the engine having
    accepted the move.
    """

    from_sq: Square
    to_sq: Square
    piece: PieceType
    color: Color
    san: str
    lan: str
    flags: str
    before: str
    after: str
    promotion: PieceType | None = None
    captured: PieceType | None = None
    synthetic: bool = False

    @classmethod
    def synthetic_move(
        cls,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None,
        fen: str,
        color: Color = Color.WHITE,
    ) -> MoveRecord:
        """Placeholder record for a move the rules engine refused.

        The position strings both carry *fen*: the engine state is not
        advanced.
        """
        return cls(
            from_sq=from_sq,
            to_sq=to_sq,
            piece=PieceType.PAWN,
            color=color,
            san=f"{from_sq}-{to_sq}",
            lan=f"{from_sq}{to_sq}",
            flags="",
            before=fen,
            after=fen,
            promotion=promotion,
            synthetic=True,
        )

    @property
    def is_capture(self) -> bool:
        return FLAG_CAPTURE in self.flags or FLAG_EN_PASSANT in self.flags

    def __str__(self) -> str:
        return self.lan

    def to_dict(self) -> dict[str, Any]:
        """Callback payload representation."""
        data: dict[str, Any] = {
            "from": self.from_sq,
            "to": self.to_sq,
            "color": "w" if self.color is Color.WHITE else "b",
            "piece": self.piece.symbol,
            "san": self.san,
            "lan": self.lan,
            "flags": self.flags,
            "before": self.before,
            "after": self.after,
        }
        if self.promotion is not None:
            data["promotion"] = self.promotion.symbol
        if self.captured is not None:
            data["captured"] = self.captured.symbol
        return data
