"""BoardStateStore — the canonical board snapshot shared with renderers."""

from __future__ import annotations

from collections.abc import Callable

from chesswidget.core.board import Board

BoardListener = Callable[[Board], None]


class BoardStateStore:
    """Single-writer, many-reader holder of the current ``Board``.

    Writes always replace the whole board.  Listeners run synchronously on
    the writer's thread, in subscription order.
    """

    __slots__ = ("_board", "_listeners")

    def __init__(self, board: Board | None = None) -> None:
        self._board = board if board is not None else Board.empty()
        self._listeners: list[BoardListener] = []

    @property
    def board(self) -> Board:
        return self._board

    def publish(self, board: Board) -> None:
        """Replace the board and notify every listener."""
        self._board = board
        for cb in list(self._listeners):
            cb(board)

    def subscribe(self, listener: BoardListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe
