"""MainWindow — demo host around a single board widget."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chesswidget.core.errors import RulesViolation
from chesswidget.game.controller import ChessboardController
from chesswidget.game.orchestrator import MoveEvent
from chesswidget.game.settings import BoardSettings
from chesswidget.ui.board_view import BoardView

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Board plus undo / reset / flip buttons and a status line."""

    def __init__(self, settings: BoardSettings | None = None) -> None:
        super().__init__()
        self._controller = ChessboardController(settings)
        self.setWindowTitle(f"Chessboard ({self._controller.mode.value})")

        self._board_view = BoardView(self._controller)
        self._status = QLabel()

        self._btn_undo = QPushButton("Undo")
        self._btn_undo.clicked.connect(self._on_undo)
        self._btn_reset = QPushButton("Reset")
        self._btn_reset.clicked.connect(self._on_reset)
        self._btn_flip = QPushButton("Flip")
        self._btn_flip.clicked.connect(self._on_flip)

        buttons = QHBoxLayout()
        for btn in (self._btn_undo, self._btn_reset, self._btn_flip):
            buttons.addWidget(btn)
        buttons.addStretch(1)

        layout = QVBoxLayout()
        layout.addWidget(self._board_view, 1)
        layout.addLayout(buttons)
        layout.addWidget(self._status)
        central = QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)

        self._controller.events.on_move.append(self._on_move)
        self._update_status()

    @property
    def controller(self) -> ChessboardController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    def status_text(self) -> str:
        return self._status.text()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move(self, event: MoveEvent) -> None:
        _LOGGER.info("Move %s -> %s", event.move.san, event.status.fen)
        self._update_status(event.move.san)

    def _on_undo(self) -> None:
        try:
            self._controller.undo()
        except RulesViolation as exc:
            self._status.setText(f"Undo failed: {exc}")
            return
        self._update_status()

    def _on_reset(self) -> None:
        self._controller.reset_board(self._controller.settings.fen)
        self._update_status()

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    def _update_status(self, last_san: str | None = None) -> None:
        state = self._controller.get_state()
        side = str(self._controller.turn).capitalize()
        parts = [f"{side} to move"]
        if last_san:
            parts.append(f"last: {last_san}")
        if state.is_checkmate:
            parts.append("checkmate")
        elif state.is_check:
            parts.append("check")
        elif state.is_draw:
            parts.append("draw")
        self._status.setText(" | ".join(parts))
        self._board_view.board_scene.set_interactive(not state.is_game_over)
