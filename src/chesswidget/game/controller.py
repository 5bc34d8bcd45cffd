"""ChessboardController — the imperative surface a host uses to drive a board.

Composes the rules-engine adapter, board store, promotion slot and move
orchestrator for one board session.
"""

from __future__ import annotations

from chesswidget.core.board import Board
from chesswidget.core.enums import Color, ValidationMode
from chesswidget.core.move import MoveRecord
from chesswidget.core.status import GameStatus
from chesswidget.core.types import Square
from chesswidget.engine.adapter import RulesEngineAdapter
from chesswidget.game.king_locator import KingLocator
from chesswidget.game.orchestrator import BoardEvents, MoveEvent, MoveOrchestrator
from chesswidget.game.promotion import PromotionCoordinator
from chesswidget.game.settings import BoardSettings
from chesswidget.game.store import BoardStateStore


class ChessboardController:
    """One board session.

    The validation mode is fixed for the session's lifetime; every failure
    path, strict or permissive, is decided by the adapter.
    """

    __slots__ = (
        "_settings",
        "_adapter",
        "_store",
        "_promotion",
        "_orchestrator",
    )

    def __init__(self, settings: BoardSettings | None = None) -> None:
        self._settings = settings or BoardSettings()
        self._adapter = RulesEngineAdapter(
            self._settings.validation_mode, self._settings.fen
        )
        self._store = BoardStateStore(self._adapter.current_board())
        self._promotion = PromotionCoordinator()
        self._orchestrator = MoveOrchestrator(
            self._adapter,
            self._store,
            self._promotion,
            king_locator=KingLocator(self._adapter),
            events=BoardEvents(),
            checkmate_highlight=self._settings.checkmate_highlight,
        )

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> BoardSettings:
        return self._settings

    @property
    def mode(self) -> ValidationMode:
        return self._adapter.mode

    @property
    def adapter(self) -> RulesEngineAdapter:
        return self._adapter

    @property
    def store(self) -> BoardStateStore:
        return self._store

    @property
    def board(self) -> Board:
        return self._store.board

    @property
    def promotion(self) -> PromotionCoordinator:
        return self._promotion

    @property
    def orchestrator(self) -> MoveOrchestrator:
        return self._orchestrator

    @property
    def events(self) -> BoardEvents:
        return self._orchestrator.events

    @property
    def turn(self) -> Color:
        return self._orchestrator.turn

    # ── Host operations ──────────────────────────────────────────────────

    def move(self, from_sq: Square, to_sq: Square) -> MoveEvent | None:
        """Play a move as if the piece on *from_sq* were dropped on *to_sq*."""
        return self._orchestrator.on_move(from_sq, to_sq)

    def undo(self) -> MoveRecord | None:
        """Take back the last move the engine accepted."""
        record = self._adapter.undo()
        self._orchestrator.refresh_turn()
        self._store.publish(self._adapter.current_board())
        return record

    def highlight(self, square: Square, color: str | None = None) -> None:
        self._orchestrator.highlight(square, color)

    def reset_all_highlights(self) -> None:
        self._orchestrator.reset_highlights()

    def reset_board(self, fen: str | None = None) -> None:
        """Start over from *fen*, or from the standard position.

        A pending promotion is abandoned.  In strict mode an illegal *fen*
        raises and the current position stays.
        """
        if fen:
            board = self._adapter.load(fen)
        else:
            board = self._adapter.reset()
        self._promotion.cancel()
        self._orchestrator.reset()
        self._store.publish(board)

    def get_state(self) -> GameStatus:
        return self._adapter.status()
