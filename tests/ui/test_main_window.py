"""Tests for the demo MainWindow."""

from __future__ import annotations

from chesswidget.core.enums import ValidationMode
from chesswidget.game.settings import BoardSettings
from chesswidget.ui.main_window import MainWindow


def test_status_follows_moves_and_undo() -> None:
    window = MainWindow()
    assert window.status_text() == "White to move"

    window.controller.move("e2", "e4")
    assert window.status_text() == "Black to move | last: e4"

    window._btn_undo.click()
    assert window.status_text() == "White to move"


def test_status_reports_checkmate() -> None:
    window = MainWindow()
    for uci in ("f2f3", "e7e5", "g2g4", "d8h4"):
        window.controller.move(uci[:2], uci[2:4])
    assert window.status_text() == "White to move | last: Qh4# | checkmate"


def test_reset_and_flip_buttons() -> None:
    window = MainWindow(BoardSettings(validation_mode=ValidationMode.PERMISSIVE))
    assert "permissive" in window.windowTitle()
    window.controller.move("e2", "e4")

    window._btn_reset.click()
    assert window.controller.board["e2"] is not None

    scene = window.board_view.board_scene
    window._btn_flip.click()
    assert scene.is_flipped()


def test_board_locks_after_mate_and_unlocks_on_undo() -> None:
    window = MainWindow()
    scene = window.board_view.board_scene
    for uci in ("f2f3", "e7e5", "g2g4", "d8h4"):
        window.controller.move(uci[:2], uci[2:4])
    assert not scene.is_interactive()

    window._btn_undo.click()
    assert scene.is_interactive()
