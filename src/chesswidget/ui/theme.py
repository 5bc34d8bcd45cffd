"""Visual theme constants for the board widget."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor  # selected piece origin
    highlight_target: QColor  # selectable destinations
    highlight_default: QColor  # host highlight without an explicit colour
    last_move: QColor  # last move origin / destination
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    piece_white: QColor
    piece_black: QColor

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme registered under *name*; unknown names give the default."""
        factory = {"default": cls.default, "blue": cls.blue}.get(name, cls.default)
        return factory()

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_selected=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_target=QColor(0, 0, 0, 40),  # dark dot overlay
            highlight_default=QColor(255, 255, 0, 120),
            last_move=QColor(155, 199, 0, 105),  # green
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_selected=QColor(255, 255, 0, 100),
            highlight_target=QColor(0, 0, 0, 40),
            highlight_default=QColor(255, 255, 0, 120),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
        )


def parse_color(value: str | None, fallback: QColor) -> QColor:
    """QColor for a colour string, or *fallback* when it is empty/invalid.

    Accepts ``#rrggbbaa`` (CSS order) besides the forms QColor understands.
    """
    if not value:
        return fallback
    if value.startswith("#") and len(value) == 9:
        rgb = QColor(value[:7])
        try:
            alpha = int(value[7:], 16)
        except ValueError:
            return fallback
        if not rgb.isValid() or not 0 <= alpha <= 255:
            return fallback
        rgb.setAlpha(alpha)
        return rgb
    color = QColor(value)
    return color if color.isValid() else fallback
