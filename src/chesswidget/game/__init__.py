"""Board session layer — move pipeline, promotion slot, board store.

Quick start::

    from chesswidget.game import BoardSettings, ChessboardController

    ctrl = ChessboardController(BoardSettings())
    ctrl.events.on_move.append(lambda ev: print(ev.to_payload()))
    ctrl.move("e2", "e4")
"""

from chesswidget.game.controller import ChessboardController
from chesswidget.game.king_locator import KingLocator
from chesswidget.game.orchestrator import BoardEvents, MoveEvent, MoveOrchestrator
from chesswidget.game.promotion import PendingPromotion, PromotionCoordinator
from chesswidget.game.settings import STARTING_FEN, BoardSettings
from chesswidget.game.store import BoardStateStore

__all__ = [
    "BoardEvents",
    "BoardSettings",
    "BoardStateStore",
    "ChessboardController",
    "KingLocator",
    "MoveEvent",
    "MoveOrchestrator",
    "PendingPromotion",
    "PromotionCoordinator",
    "STARTING_FEN",
]
