"""Core domain layer — value objects shared by the engine and game layers.

Quick start::

    from chesswidget.core import Board, CoordinateMapper

    board = Board.from_placement("8/8/8/8/8/8/8/4K3")
    mapper = CoordinateMapper(tile_size=80)
    assert mapper.square_of(*mapper.pixel_of("e1")) == "e1"
"""

from chesswidget.core.board import Board
from chesswidget.core.coordinates import CoordinateMapper
from chesswidget.core.enums import PROMOTION_TYPES, Color, PieceType, ValidationMode
from chesswidget.core.errors import RulesViolation
from chesswidget.core.move import MoveRecord
from chesswidget.core.piece import Piece
from chesswidget.core.status import GameStatus
from chesswidget.core.types import (
    ALL_SQUARES,
    Square,
    file_index,
    is_valid_square,
    make_square,
    parse_square,
    rank_index,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    "PROMOTION_TYPES",
    "ValidationMode",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "file_index",
    "is_valid_square",
    "make_square",
    "parse_square",
    "rank_index",
    # Domain objects
    "Board",
    "CoordinateMapper",
    "GameStatus",
    "MoveRecord",
    "Piece",
    # Errors
    "RulesViolation",
]
