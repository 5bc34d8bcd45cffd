"""BoardSettings — per-session configuration of the board widget."""

from __future__ import annotations

from dataclasses import dataclass

from chesswidget.core.enums import ValidationMode

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


@dataclass
class BoardSettings:
    """All user-configurable settings of a board session.

    ``validation_mode`` is read once, when the controller is created.
    """

    # Rules
    validation_mode: ValidationMode = ValidationMode.STRICT
    fen: str = STARTING_FEN

    # Board
    tile_size: int = 80  # px per square
    flipped: bool = False
    show_coordinates: bool = True
    show_legal_moves: bool = True
    theme: str = "default"  # "default" or "blue"

    # Highlights (any name or #rrggbb[aa] string QColor accepts)
    checkmate_highlight: str = "#e53935"
    last_move_highlight: str = "#9bc70069"
