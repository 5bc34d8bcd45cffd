"""Tests for BoardStateStore."""

from chesswidget.core.board import Board
from chesswidget.game.store import BoardStateStore

START = Board.from_placement("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")


def test_defaults_to_empty_board() -> None:
    assert BoardStateStore().board == Board.empty()


def test_publish_replaces_and_notifies_in_order() -> None:
    store = BoardStateStore()
    seen: list[tuple[str, Board]] = []
    store.subscribe(lambda b: seen.append(("first", b)))
    store.subscribe(lambda b: seen.append(("second", b)))

    store.publish(START)

    assert store.board is START
    assert seen == [("first", START), ("second", START)]


def test_unsubscribe_stops_notifications() -> None:
    store = BoardStateStore(START)
    seen: list[Board] = []
    unsubscribe = store.subscribe(seen.append)
    unsubscribe()
    unsubscribe()  # idempotent

    store.publish(Board.empty())

    assert seen == []
