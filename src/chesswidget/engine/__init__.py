"""Rules-engine boundary: python-chess behind a mode-aware adapter."""

from chesswidget.engine.adapter import RulesEngineAdapter
from chesswidget.engine.outcome import Outcome, attempt

__all__ = ["Outcome", "RulesEngineAdapter", "attempt"]
