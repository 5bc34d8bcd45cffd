"""KingLocator — finds a king by scanning the engine board."""

from __future__ import annotations

from chesswidget.core.enums import Color, PieceType
from chesswidget.core.piece import Piece
from chesswidget.core.types import ALL_SQUARES, Square
from chesswidget.engine.adapter import RulesEngineAdapter


class KingLocator:
    """Linear scan over all 64 squares through the adapter's ``piece_at``.

    Lookup failures follow the adapter's mode: they raise in strict mode and
    read as empty squares in permissive mode, so the result is ``None``.
    """

    __slots__ = ("_adapter",)

    def __init__(self, adapter: RulesEngineAdapter) -> None:
        self._adapter = adapter

    def find(self, color: Color) -> Square | None:
        return self.find_piece(Piece(color, PieceType.KING))

    def find_piece(self, target: Piece) -> Square | None:
        for sq in ALL_SQUARES:
            if self._adapter.piece_at(sq) == target:
                return sq
        return None
