"""BoardView — square QGraphicsView showing one board scene."""

from __future__ import annotations

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QPainter, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from chesswidget.game.controller import ChessboardController
from chesswidget.ui.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Scales the scene to fit and keeps itself square."""

    _MIN_SIDE = 320

    def __init__(
        self,
        controller: ChessboardController,
        parent: QWidget | None = None,
    ) -> None:
        self._scene = BoardScene(controller)
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        policy = QSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        policy.setHeightForWidth(True)
        self.setSizePolicy(policy)
        self.setMinimumSize(self._MIN_SIDE, self._MIN_SIDE)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def sizeHint(self) -> QSize:
        side = int(self._scene.mapper.board_size)
        return QSize(side, side)

    def heightForWidth(self, width: int) -> int:
        return width

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
