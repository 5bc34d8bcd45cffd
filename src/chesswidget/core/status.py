"""GameStatus — snapshot of the engine's verdict on the current position."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class GameStatus:
    is_check: bool = False
    is_checkmate: bool = False
    is_draw: bool = False
    is_stalemate: bool = False
    is_threefold_repetition: bool = False
    is_insufficient_material: bool = False
    is_game_over: bool = False
    fen: str = ""

    @classmethod
    def default(cls) -> GameStatus:
        """All flags false and an empty FEN."""
        return cls()

    def to_dict(self, *, in_promotion: bool | None = None) -> dict[str, Any]:
        data = asdict(self)
        if in_promotion is not None:
            data["in_promotion"] = in_promotion
        return data
