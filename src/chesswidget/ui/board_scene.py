"""BoardScene — QGraphicsScene that draws the board and feeds gestures in.

The scene is a reader of the controller's ``BoardStateStore`` and a listener
of its ``BoardEvents``; it never touches the rules engine directly.
"""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
    QWidget,
)

from chesswidget.core.board import Board
from chesswidget.core.coordinates import CoordinateMapper
from chesswidget.core.enums import Color
from chesswidget.core.types import (
    ALL_SQUARES,
    Square,
    file_index,
    is_valid_square,
    rank_index,
)
from chesswidget.game.controller import ChessboardController
from chesswidget.ui.piece_item import PieceItem
from chesswidget.ui.promotion_dialog import PromotionDialog
from chesswidget.ui.theme import BoardTheme, parse_color


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items."""

    def __init__(
        self,
        controller: ChessboardController,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        settings = controller.settings
        self._controller = controller
        self._theme = BoardTheme.named(settings.theme)
        self._mapper = CoordinateMapper(settings.tile_size, settings.flipped)
        self._board: Board = controller.board

        # Interaction state
        self._dragging_item: PieceItem | None = None
        self._disabled_squares: set[Square] = set()
        self._interactive = True
        self._show_coordinates = settings.show_coordinates
        self._show_legal_moves = settings.show_legal_moves
        self._promotion_dialog: PromotionDialog | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: dict[Square, QGraphicsRectItem] = {}
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._selection_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        events = controller.events
        events.on_highlight.append(self.add_highlight)
        events.on_reset_highlights.append(self.clear_highlights)
        events.on_last_move.append(self.highlight_last_move)
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_square_enabled.append(self.set_square_enabled)
        controller.promotion.on_changed.append(self._on_promotion_changed)
        self._unsubscribe = controller.store.subscribe(self.set_board)

        self._draw_board()
        self._sync_pieces()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    @property
    def controller(self) -> ChessboardController:
        return self._controller

    def set_board(self, board: Board) -> None:
        """Show *board* (full redraw of pieces)."""
        self._board = board
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive
        if not interactive:
            self._controller.orchestrator.clear_selection()

    def is_interactive(self) -> bool:
        return self._interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._mapper.set_flipped(flipped)
        self._draw_board()
        self._sync_pieces()

    def is_flipped(self) -> bool:
        return self._mapper.flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_tile_size(self, size: float) -> None:
        """Resize every square to *size* pixels."""
        self._mapper.set_tile_size(size)
        self._draw_board()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide selectable-square highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._selection_items)

    def add_highlight(self, sq: Square, color: str | None = None) -> None:
        """Overlay *sq* with *color* (theme default when omitted)."""
        if not is_valid_square(sq):
            return
        self._remove_highlight(sq)
        rect = self._make_highlight(
            sq, parse_color(color, self._theme.highlight_default)
        )
        rect.setZValue(0.6)
        self._highlight_items[sq] = rect

    def clear_highlights(self) -> None:
        for sq in list(self._highlight_items):
            self._remove_highlight(sq)
        self._clear_items(self._last_move_highlights)

    def highlight_last_move(self, from_sq: Square, to_sq: Square) -> None:
        """Highlight origin/destination of the last move."""
        self._clear_items(self._last_move_highlights)
        squares = [sq for sq in (from_sq, to_sq) if is_valid_square(sq)]
        color = parse_color(
            self._controller.settings.last_move_highlight, self._theme.last_move
        )
        for sq in squares:
            rect = self._make_highlight(sq, color)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    def set_square_enabled(self, sq: Square, enabled: bool) -> None:
        """Block or restore interaction with the piece on *sq*."""
        if enabled:
            self._disabled_squares.discard(sq)
        else:
            self._disabled_squares.add(sq)
        item = self._piece_items.get(sq)
        if item is not None:
            item.set_enabled(enabled)

    def highlighted_squares(self) -> list[Square]:
        return list(self._highlight_items)

    def detach(self) -> None:
        """Stop following the controller's store."""
        self._unsubscribe()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self._mapper.tile_size
        font = QFont("DejaVu Sans", max(9, int(t) // 8))

        for sq in ALL_SQUARES:
            f, r = file_index(sq), rank_index(sq)
            x, y = self._mapper.pixel_of(sq)
            is_dark = (f + r) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(x, y, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_dark else self._theme.coord_light

            # Rank numbers (left edge)
            if self._mapper.visual_coords(sq)[0] == 0:
                txt = QGraphicsSimpleTextItem(sq[1])
                txt.setFont(font)
                txt.setBrush(QBrush(text_color))
                txt.setPos(x + 2, y + 1)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

            # File letters (bottom edge)
            if self._mapper.visual_coords(sq)[1] == 7:
                txt = QGraphicsSimpleTextItem(sq[0])
                txt.setFont(font)
                txt.setBrush(QBrush(text_color))
                txt.setPos(x + t - 12, y + t - 16)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

        size = self._mapper.board_size
        self.setSceneRect(0, 0, size, size)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()
        self._dragging_item = None

        t = self._mapper.tile_size
        for sq, piece in self._board.occupied():
            fill = (
                self._theme.piece_white
                if piece.color is Color.WHITE
                else self._theme.piece_black
            )
            outline = (
                self._theme.piece_black
                if piece.color is Color.WHITE
                else self._theme.piece_white
            )
            item = PieceItem(piece, sq, t, fill, outline)
            self._place(item, sq)
            item.set_enabled(sq not in self._disabled_squares)
            self.addItem(item)
            self._piece_items[sq] = item

    def _place(self, item: PieceItem, sq: Square) -> None:
        x, y = self._mapper.pixel_of(sq)
        item.setPos(QPointF(x, y) + item.offset())

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        pos = event.scenePos()
        sq = self._mapper.square_of(pos.x(), pos.y())
        orchestrator = self._controller.orchestrator
        if sq is None:
            orchestrator.clear_selection()
            return super().mousePressEvent(event)

        # Clicking a target of the selected piece → make the move
        selected = orchestrator.selected_square
        if (
            selected is not None
            and sq != selected
            and self._accepts_drop(sq)
            and not self._same_side(selected, sq)
        ):
            orchestrator.move_to(sq)
            return

        item = self._piece_items.get(sq)
        if item is not None and self._can_pick(sq):
            orchestrator.select_piece(sq)
            item.enable_drag(True)
            item.start_drag()
            self._dragging_item = item
        else:
            orchestrator.clear_selection()

        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._dragging_item is not None and event is not None:
            item = self._dragging_item
            pos = event.scenePos()
            drop_sq = self._mapper.square_of(pos.x(), pos.y())

            if drop_sq is not None and drop_sq != item.square:
                if self._accepts_drop(drop_sq):
                    item.finish_drag()
                    item.enable_drag(False)
                    self._dragging_item = None
                    self._place(item, drop_sq)
                    self._controller.orchestrator.on_move(item.square, drop_sq)
                    return

            # Invalid drop — snap back
            item.cancel_drag()
            item.enable_drag(False)
            self._dragging_item = None

        super().mouseReleaseEvent(event)

    def _can_pick(self, sq: Square) -> bool:
        """Whether the piece on *sq* may be picked up."""
        if sq in self._disabled_squares or self._controller.promotion.is_pending:
            return False
        piece = self._board[sq]
        if piece is None:
            return False
        if self._controller.mode.is_permissive:
            return True
        return piece.color == self._controller.turn

    def _same_side(self, a: Square, b: Square) -> bool:
        pa, pb = self._board[a], self._board[b]
        return pa is not None and pb is not None and pa.color == pb.color

    def _accepts_drop(self, sq: Square) -> bool:
        """Strict sessions only drop onto legal targets; permissive on any."""
        if self._controller.mode.is_permissive:
            return True
        return sq in self._controller.orchestrator.selectable_squares

    # ── Selection / promotion ────────────────────────────────────────────

    def _on_selection_changed(
        self, selected: Square | None, targets: list[Square]
    ) -> None:
        self._clear_items(self._selection_items)
        if selected is None:
            return
        self._selection_items.append(
            self._make_highlight(selected, self._theme.highlight_selected)
        )
        if self._show_legal_moves:
            for sq in targets:
                self._selection_items.append(
                    self._make_highlight(sq, self._theme.highlight_target)
                )

    def _on_promotion_changed(self, pending: bool) -> None:
        if pending:
            self._open_promotion_dialog()
            return
        dialog = self._promotion_dialog
        self._promotion_dialog = None
        if dialog is not None and dialog.isVisible():
            dialog.accept()
        # An abandoned promotion leaves the dragged pawn on the wrong square.
        self._sync_pieces()

    def _open_promotion_dialog(self) -> None:
        promotion = self._controller.promotion
        views = self.views()
        parent: QWidget | None = views[0] if views else None
        dialog = PromotionDialog(promotion.choices(), parent)
        dialog.piece_chosen.connect(promotion.resolve)
        dialog.rejected.connect(promotion.cancel)
        self._promotion_dialog = dialog
        dialog.open()

    # ── Helpers ──────────────────────────────────────────────────────────

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    def _remove_highlight(self, sq: Square) -> None:
        item = self._highlight_items.pop(sq, None)
        if item is not None:
            self.removeItem(item)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self._mapper.tile_size
        x, y = self._mapper.pixel_of(sq)
        rect = QGraphicsRectItem(x, y, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
