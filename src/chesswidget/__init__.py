"""chesswidget — a draggable chessboard with strict and permissive validation."""

__version__ = "0.1.0"
