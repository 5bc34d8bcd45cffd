"""MoveOrchestrator — the move pipeline from a drop to a published board.

Pipeline for ``on_move(from, to)``:

1. clear selection and highlights, mark the last move;
2. decide whether the move is a promotion;
3. if so, park the rest of the pipeline in the PromotionCoordinator;
4. apply the move through the RulesEngineAdapter;
5. (a strict-mode rejection raises out of step 4 and ends the pipeline);
6. refresh the side to move;
7. on checkmate, highlight the mated king;
8. take a status snapshot;
9. fire the move callbacks;
10. publish the new board.

Mode-specific failure handling stays inside the adapter.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from chesswidget.core.enums import Color, PieceType
from chesswidget.core.move import MoveRecord
from chesswidget.core.status import GameStatus
from chesswidget.core.types import Square, is_valid_square, rank_number
from chesswidget.engine.adapter import RulesEngineAdapter
from chesswidget.game.king_locator import KingLocator
from chesswidget.game.promotion import PromotionCoordinator
from chesswidget.game.store import BoardStateStore

# ── Event definitions ────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveEvent:
    """What the move callback receives for every completed move."""

    move: MoveRecord
    status: GameStatus
    in_promotion: bool

    def to_payload(self) -> dict[str, Any]:
        return {
            "move": self.move.to_dict(),
            "state": self.status.to_dict(in_promotion=self.in_promotion),
        }


MoveCallback = Callable[[MoveEvent], None]
HighlightCallback = Callable[[Square, str | None], None]
LastMoveCallback = Callable[[Square, Square], None]
TurnCallback = Callable[[Color], None]
SelectionCallback = Callable[[Square | None, list[Square]], None]
SquareEnabledCallback = Callable[[Square, bool], None]


@dataclass
class BoardEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_highlight: list[HighlightCallback] = field(default_factory=list)
    on_reset_highlights: list[Callable[[], None]] = field(default_factory=list)
    on_last_move: list[LastMoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_square_enabled: list[SquareEnabledCallback] = field(default_factory=list)


# ── Orchestrator ─────────────────────────────────────────────────────────────


class MoveOrchestrator:
    """Runs the move pipeline and owns selection state.

    Not reentrant: starting a promotion while another is pending replaces
    the earlier one.
    """

    __slots__ = (
        "_adapter",
        "_store",
        "_promotion",
        "_kings",
        "_checkmate_highlight",
        "_selected",
        "_selectable",
        "_turn",
        "events",
    )

    def __init__(
        self,
        adapter: RulesEngineAdapter,
        store: BoardStateStore,
        promotion: PromotionCoordinator,
        *,
        king_locator: KingLocator | None = None,
        events: BoardEvents | None = None,
        checkmate_highlight: str | None = None,
    ) -> None:
        self._adapter = adapter
        self._store = store
        self._promotion = promotion
        self._kings = king_locator or KingLocator(adapter)
        self._checkmate_highlight = checkmate_highlight
        self._selected: Square | None = None
        self._selectable: list[Square] = []
        self._turn = adapter.turn()
        self.events = events or BoardEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def turn(self) -> Color:
        return self._turn

    @property
    def selected_square(self) -> Square | None:
        return self._selected

    @property
    def selectable_squares(self) -> list[Square]:
        return list(self._selectable)

    # ── Pipeline ─────────────────────────────────────────────────────────

    def on_move(self, from_sq: Square, to_sq: Square) -> MoveEvent | None:
        """Handle a completed drag from *from_sq* to *to_sq*.

        Returns the move event, or ``None`` while a promotion is pending.
        """
        self._set_selection(None, [])
        self.reset_highlights()
        self._emit_last_move(from_sq, to_sq)

        if not self.is_promoting(from_sq, to_sq):
            return self._commit(from_sq, to_sq, None)

        self._emit_square_enabled(to_sq, False)

        def _resume(piece_type: PieceType) -> None:
            try:
                self._commit(from_sq, to_sq, piece_type)
            finally:
                self._emit_square_enabled(to_sq, True)

        self._promotion.request_promotion(
            from_sq,
            to_sq,
            self._adapter.turn(),
            _resume,
            on_abandon=lambda: self._emit_square_enabled(to_sq, True),
        )
        return None

    def is_promoting(self, from_sq: Square, to_sq: Square) -> bool:
        """True if a pawn on *from_sq* would reach its last rank on *to_sq*."""
        if not is_valid_square(to_sq) or rank_number(to_sq) not in (1, 8):
            return False
        piece = self._adapter.piece_at(from_sq)
        return (
            piece is not None
            and piece.piece_type is PieceType.PAWN
            and rank_number(to_sq) == piece.color.back_rank
        )

    def _commit(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None,
    ) -> MoveEvent:
        move = self._adapter.apply_move(from_sq, to_sq, promotion)

        self.refresh_turn()

        if self._adapter.is_checkmate():
            king_sq = self._kings.find(self._turn)
            if king_sq is not None:
                self.highlight(king_sq, self._checkmate_highlight)

        status = self._adapter.status()
        event = MoveEvent(move, status, in_promotion=promotion is not None)
        for cb in list(self.events.on_move):
            cb(event)

        self._store.publish(self._adapter.current_board())
        return event

    # ── Selection (click-to-move) ────────────────────────────────────────

    def select_piece(self, sq: Square) -> list[Square]:
        """Select *sq* and return the squares it may move to.

        Permissive sessions accept any destination, so none are offered.
        """
        if self._adapter.mode.is_permissive:
            targets: list[Square] = []
        else:
            targets = self._adapter.legal_moves_from(sq)
        self._set_selection(sq, targets)
        return list(targets)

    def move_to(self, to_sq: Square) -> bool:
        """Move the selected piece to *to_sq*; False if nothing is selected."""
        if self._selected is None:
            return False
        self.on_move(self._selected, to_sq)
        return True

    def clear_selection(self) -> None:
        self._set_selection(None, [])

    def reset(self) -> None:
        """Drop selection and highlights and re-read the side to move."""
        self._set_selection(None, [])
        self.reset_highlights()
        self.refresh_turn()

    # ── Highlights / turn ────────────────────────────────────────────────

    def highlight(self, sq: Square, color: str | None = None) -> None:
        for cb in list(self.events.on_highlight):
            cb(sq, color)

    def reset_highlights(self) -> None:
        for cb in list(self.events.on_reset_highlights):
            cb()

    def refresh_turn(self) -> Color:
        turn = self._adapter.turn()
        changed = turn != self._turn
        self._turn = turn
        if changed:
            for cb in list(self.events.on_turn_changed):
                cb(turn)
        return turn

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_selection(self, sq: Square | None, targets: list[Square]) -> None:
        self._selected = sq
        self._selectable = list(targets)
        for cb in list(self.events.on_selection_changed):
            cb(sq, list(targets))

    def _emit_last_move(self, from_sq: Square, to_sq: Square) -> None:
        for cb in list(self.events.on_last_move):
            cb(from_sq, to_sq)

    def _emit_square_enabled(self, sq: Square, enabled: bool) -> None:
        for cb in list(self.events.on_square_enabled):
            cb(sq, enabled)
