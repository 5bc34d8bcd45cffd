"""Board — immutable 8×8 snapshot of piece placement.

Rows run top-down from rank 8 to rank 1 and columns from file a to file h,
which is the orientation the rendering layer draws in.  A snapshot is never
patched: every change produces a new ``Board``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

import chess

from chesswidget.core.enums import Color, PieceType
from chesswidget.core.piece import Piece
from chesswidget.core.types import ALL_SQUARES, Square, file_index, rank_index

Row: TypeAlias = tuple[Piece | None, ...]


class Board:
    """Whole-board value object; compare with ``==``."""

    __slots__ = ("_rows",)

    def __init__(self, rows: tuple[Row, ...]) -> None:
        if len(rows) != 8 or any(len(row) != 8 for row in rows):
            raise ValueError("Board must be 8×8")
        self._rows = rows

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> Board:
        return cls(tuple((None,) * 8 for _ in range(8)))

    @classmethod
    def from_chess(cls, board: chess.BaseBoard) -> Board:
        """Snapshot the placement of a python-chess board."""
        grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        for index, piece in board.piece_map().items():
            row = 7 - chess.square_rank(index)
            grid[row][chess.square_file(index)] = Piece.from_chess(piece)
        return cls(tuple(tuple(row) for row in grid))

    @classmethod
    def from_placement(cls, fen: str) -> Board:
        """Build from the placement field of a FEN (other fields ignored).

        Raises ``ValueError`` when the placement is malformed.
        """
        placement = fen.strip().split(" ", 1)[0]
        return cls.from_chess(chess.BaseBoard(placement))

    # ── Access ───────────────────────────────────────────────────────────

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._rows[7 - rank_index(sq)][file_index(sq)]

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every non-empty square."""
        for sq in ALL_SQUARES:
            piece = self[sq]
            if piece is not None:
                yield sq, piece

    def count(self) -> int:
        return sum(1 for _ in self.occupied())

    def king_square(self, color: Color) -> Square | None:
        target = Piece(color, PieceType.KING)
        for sq, piece in self.occupied():
            if piece == target:
                return sq
        return None

    def placement(self) -> str:
        """FEN placement field for this snapshot."""
        parts: list[str] = []
        for row in self._rows:
            text = ""
            gap = 0
            for piece in row:
                if piece is None:
                    gap += 1
                    continue
                if gap:
                    text += str(gap)
                    gap = 0
                text += str(piece)
            if gap:
                text += str(gap)
            parts.append(text)
        return "/".join(parts)

    # ── Value semantics ──────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Board({self.placement()!r})"
