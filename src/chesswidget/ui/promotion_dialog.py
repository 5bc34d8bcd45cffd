"""Promotion dialog — lets user pick the promotion piece."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chesswidget.core.enums import PieceType
from chesswidget.core.piece import Piece


class PromotionDialog(QDialog):
    """Window-modal dialog offering the promotable pieces.

    Signals:
        piece_chosen(PieceType): Emitted once when a piece button is clicked.
    """

    piece_chosen = pyqtSignal(object)

    def __init__(self, choices: list[Piece], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowModality(Qt.WindowModality.WindowModal)
        self.setFixedSize(340, 130)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )
        self.setWindowTitle("Promotion")

        self._selected: PieceType | None = None
        self._buttons: dict[PieceType, QPushButton] = {}

        layout = QVBoxLayout(self)
        label = QLabel("Choose a piece:")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setFont(QFont("DejaVu Sans", 11))
        layout.addWidget(label)

        btn_row = QHBoxLayout()
        glyph_font = QFont("DejaVu Sans")
        glyph_font.setPixelSize(40)
        for piece in choices:
            btn = QPushButton(piece.symbol)
            btn.setFont(glyph_font)
            btn.setFixedSize(68, 68)
            btn.setToolTip(piece.piece_type.name.capitalize())
            btn.clicked.connect(lambda checked, p=piece.piece_type: self._choose(p))
            btn_row.addWidget(btn)
            self._buttons[piece.piece_type] = btn

        layout.addLayout(btn_row)

    @property
    def selected(self) -> PieceType | None:
        return self._selected

    def button(self, piece_type: PieceType) -> QPushButton:
        return self._buttons[piece_type]

    def _choose(self, piece_type: PieceType) -> None:
        self._selected = piece_type
        self.accept()
        self.piece_chosen.emit(piece_type)
