"""PieceItem — draggable chess piece on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from chesswidget.core.piece import Piece
from chesswidget.core.types import Square


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece drawn as its Unicode glyph.

    Stores its logical *square* and supports drag & drop.
    """

    _GLYPH_RATIO = 0.72

    def __init__(
        self,
        piece: Piece,
        square: Square,
        tile_size: float,
        fill: QColor,
        outline: QColor,
    ) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.square = square
        self._tile_size = tile_size
        self._drag_origin: QPointF | None = None
        self._enabled = True

        self.setBrush(QBrush(fill))
        self.setPen(QPen(outline, 1.0))
        self._update_size(tile_size)

        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        """Allow / block user interaction with this piece."""
        self._enabled = enabled
        self.setOpacity(1.0 if enabled else 0.5)

    def offset(self) -> QPointF:
        """Offset that centres the glyph in its tile."""
        rect = self.boundingRect()
        return QPointF(
            (self._tile_size - rect.width()) / 2,
            (self._tile_size - rect.height()) / 2,
        )

    def enable_drag(self, enabled: bool) -> None:
        """Allow / disallow dragging."""
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, enabled)
        if enabled:
            self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        else:
            self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))

    def start_drag(self) -> None:
        """Called at the beginning of a drag gesture."""
        self._drag_origin = self.pos()
        self.setZValue(10)  # bring to front
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))
        self.setOpacity(0.85)

    def cancel_drag(self) -> None:
        """Snap back to original position."""
        if self._drag_origin is not None:
            self.setPos(self._drag_origin)
        self._finish_drag()

    def finish_drag(self) -> None:
        """Cleanup after a successful drop."""
        self._finish_drag()

    def _finish_drag(self) -> None:
        self._drag_origin = None
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        self.setOpacity(1.0 if self._enabled else 0.5)

    def _update_size(self, size: float) -> None:
        self._tile_size = size
        font = QFont("DejaVu Sans")
        font.setPixelSize(max(int(size * self._GLYPH_RATIO), 1))
        self.setFont(font)
