"""PromotionCoordinator — the single pending-promotion slot.

A pawn reaching its last rank suspends the move pipeline: the orchestrator
parks a continuation here and the dialog layer later calls :meth:`resolve`
with the chosen piece.  There is one slot, not a queue.  A new request
replaces the pending one: its continuation is dropped without being
called and its abandon hook runs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from chesswidget.core.enums import PROMOTION_TYPES, Color, PieceType
from chesswidget.core.piece import Piece
from chesswidget.core.types import Square

_LOGGER = logging.getLogger(__name__)

PromotionContinuation = Callable[[PieceType], None]
PendingListener = Callable[[bool], None]


@dataclass(frozen=True, slots=True)
class PendingPromotion:
    """A suspended move waiting for the promotion piece."""

    from_sq: Square
    to_sq: Square
    color: Color
    resolve: PromotionContinuation
    on_abandon: Callable[[], None] | None = None


class PromotionCoordinator:
    """Holds zero or one :class:`PendingPromotion`.

    Listeners registered in ``on_changed`` receive the new value of
    :attr:`is_pending` whenever it changes.
    """

    __slots__ = ("_pending", "on_changed")

    def __init__(self) -> None:
        self._pending: PendingPromotion | None = None
        self.on_changed: list[PendingListener] = []

    @property
    def pending(self) -> PendingPromotion | None:
        return self._pending

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    def request_promotion(
        self,
        from_sq: Square,
        to_sq: Square,
        color: Color,
        continuation: PromotionContinuation,
        *,
        on_abandon: Callable[[], None] | None = None,
    ) -> PendingPromotion:
        """Park *continuation* until a piece is chosen."""
        previous = self._pending
        if previous is not None:
            _LOGGER.debug(
                "Promotion %s-%s replaced by %s-%s before it was resolved",
                previous.from_sq,
                previous.to_sq,
                from_sq,
                to_sq,
            )
            if previous.on_abandon is not None:
                previous.on_abandon()
        self._pending = PendingPromotion(
            from_sq, to_sq, color, continuation, on_abandon
        )
        if previous is None:
            self._emit(True)
        return self._pending

    def resolve(self, piece_type: PieceType) -> None:
        """Resume the suspended move with *piece_type* and clear the slot."""
        pending = self._pending
        if pending is None:
            raise RuntimeError("No promotion is pending")
        if piece_type not in PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {piece_type.name.lower()}")
        self._pending = None
        self._emit(False)
        pending.resolve(piece_type)

    def cancel(self) -> None:
        """Abandon the pending promotion, if any, without resuming it."""
        pending = self._pending
        if pending is None:
            return
        self._pending = None
        self._emit(False)
        if pending.on_abandon is not None:
            pending.on_abandon()

    def choices(self, color: Color | None = None) -> list[Piece]:
        """The four promotable pieces in *color* (default: the pending side)."""
        if color is None:
            color = self._pending.color if self._pending else Color.WHITE
        return [Piece(color, pt) for pt in PROMOTION_TYPES]

    def _emit(self, pending: bool) -> None:
        for cb in list(self.on_changed):
            cb(pending)
