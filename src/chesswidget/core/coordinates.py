"""CoordinateMapper — pixel ↔ square conversion for a square board."""

from __future__ import annotations

import math

from chesswidget.core.types import Square, file_index, make_square, rank_index


class CoordinateMapper:
    """Maps scene pixels to squares and back.

    The board's top-left corner is the origin.  Unflipped, a8 is drawn in
    the top-left tile; flipped, h1 is.
    """

    __slots__ = ("_tile", "_flipped")

    def __init__(self, tile_size: float, flipped: bool = False) -> None:
        if tile_size <= 0:
            raise ValueError("tile_size must be positive")
        self._tile = float(tile_size)
        self._flipped = flipped

    @property
    def tile_size(self) -> float:
        return self._tile

    @property
    def board_size(self) -> float:
        return 8 * self._tile

    @property
    def flipped(self) -> bool:
        return self._flipped

    def set_flipped(self, flipped: bool) -> None:
        self._flipped = flipped

    def set_tile_size(self, tile_size: float) -> None:
        if tile_size <= 0:
            raise ValueError("tile_size must be positive")
        self._tile = float(tile_size)

    # ── Grid helpers ─────────────────────────────────────────────────────

    def visual_coords(self, sq: Square) -> tuple[int, int]:
        """Square → visual (column, row)."""
        f, r = file_index(sq), rank_index(sq)
        if self._flipped:
            return 7 - f, r
        return f, 7 - r

    def square_at(self, col: int, row: int) -> Square | None:
        """Visual (column, row) → square, or ``None`` off the board."""
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            return make_square(7 - col, row)
        return make_square(col, 7 - row)

    # ── Pixel conversion ─────────────────────────────────────────────────

    def square_of(self, x: float, y: float) -> Square | None:
        """Pixel position → square; ``None`` when outside the board."""
        if not (math.isfinite(x) and math.isfinite(y)) or x < 0 or y < 0:
            return None
        return self.square_at(int(x // self._tile), int(y // self._tile))

    def pixel_of(self, sq: Square) -> tuple[float, float]:
        """Top-left pixel of *sq*'s tile."""
        col, row = self.visual_coords(sq)
        return col * self._tile, row * self._tile

    def center_of(self, sq: Square) -> tuple[float, float]:
        x, y = self.pixel_of(sq)
        half = self._tile / 2
        return x + half, y + half
