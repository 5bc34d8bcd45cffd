"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from chesswidget.game.settings import BoardSettings

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send log records of *level* and above to stderr."""
    logging.basicConfig(level=level.upper(), format=_LOG_FORMAT, stream=sys.stderr)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    app.setApplicationName("Chessboard")
    app.setStyle("Fusion")


def run_application(
    settings: BoardSettings | None = None,
    argv: list[str] | None = None,
) -> int:
    """Create and run the Qt application showing one board."""
    from PyQt6.QtWidgets import QApplication

    from chesswidget.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Board window shown (%s mode)", window.controller.mode.value)

    return app.exec()
