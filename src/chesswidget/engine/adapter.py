"""RulesEngineAdapter — guarded façade over the python-chess rules engine.

Every call runs through :func:`attempt`, which turns engine exceptions into a
failed :class:`Outcome`, and is then settled by :meth:`_settle`: in
``STRICT`` mode the violation is raised to the caller, in ``PERMISSIVE``
mode it is logged and replaced by the call's fallback value.  No other
component catches engine errors.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

import chess

from chesswidget.core.board import Board
from chesswidget.core.enums import Color, PieceType, ValidationMode
from chesswidget.core.errors import RulesViolation
from chesswidget.core.move import (
    FLAG_BIG_PAWN,
    FLAG_CAPTURE,
    FLAG_EN_PASSANT,
    FLAG_KINGSIDE_CASTLE,
    FLAG_NORMAL,
    FLAG_PROMOTION,
    FLAG_QUEENSIDE_CASTLE,
    MoveRecord,
)
from chesswidget.core.piece import Piece
from chesswidget.core.status import GameStatus
from chesswidget.core.types import (
    Square,
    from_chess_square,
    parse_square,
    to_chess_square,
)
from chesswidget.engine.outcome import Outcome, attempt

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class RulesEngineAdapter:
    """Owns the engine board and applies the session's validation mode."""

    __slots__ = ("_mode", "_board", "_last_turn", "_last_board")

    def __init__(self, mode: ValidationMode, fen: str | None = None) -> None:
        self._mode = mode
        self._board = chess.Board()
        self._last_turn = Color.WHITE
        self._last_board = Board.from_chess(self._board)
        if fen is not None:
            self.load(fen)

    @property
    def mode(self) -> ValidationMode:
        return self._mode

    # ── Position management ──────────────────────────────────────────────

    def load(self, fen: str) -> Board:
        """Replace the engine position with *fen* and return its board.

        Strict: a malformed or illegal position raises ``RulesViolation`` and
        leaves the engine untouched.  Permissive: the placement is taken as
        given; an unparseable string yields an empty board.
        """

        def _parse() -> chess.Board:
            board = chess.Board(fen)
            if self._mode is ValidationMode.STRICT:
                status = board.status()
                if status != chess.STATUS_VALID:
                    raise RulesViolation(
                        f"Illegal position {fen!r} ({status!r})", operation="load"
                    )
            return board

        self._board = self._settle(attempt("load", _parse), chess.Board.empty)
        self._last_turn = Color.from_chess(self._board.turn)
        return self.current_board()

    def reset(self) -> Board:
        """Return the engine to the standard starting position."""
        self._board.reset()
        self._last_turn = Color.WHITE
        return self.current_board()

    def current_board(self) -> Board:
        """Snapshot of the engine's placement (last good one on failure)."""
        board = self._settle(
            attempt("current_board", lambda: Board.from_chess(self._board)),
            lambda: self._last_board,
        )
        self._last_board = board
        return board

    def fen(self) -> str:
        return self._settle(attempt("fen", self._board.fen), str)

    # ── Queries ──────────────────────────────────────────────────────────

    def turn(self) -> Color:
        """Side to move; the last known side if the engine cannot say."""
        color = self._settle(
            attempt("turn", lambda: Color.from_chess(self._board.turn)),
            lambda: self._last_turn,
        )
        self._last_turn = color
        return color

    def piece_at(self, sq: Square) -> Piece | None:
        def _lookup() -> Piece | None:
            piece = self._board.piece_at(to_chess_square(parse_square(sq)))
            return Piece.from_chess(piece) if piece is not None else None

        return self._settle(attempt("piece_at", _lookup), lambda: None)

    def legal_moves_from(self, sq: Square) -> list[Square]:
        """Destination squares of legal moves starting on *sq*.

        Castling is reported as the king's destination square.
        """

        def _targets() -> list[Square]:
            origin = to_chess_square(parse_square(sq))
            targets: list[Square] = []
            for move in self._board.generate_legal_moves(
                from_mask=chess.BB_SQUARES[origin]
            ):
                name = from_chess_square(move.to_square)
                if name not in targets:
                    targets.append(name)
            return targets

        return self._settle(attempt("legal_moves_from", _targets), list)

    def is_checkmate(self) -> bool:
        return self._settle(attempt("is_checkmate", self._board.is_checkmate), bool)

    def status(self) -> GameStatus:
        return self._settle(attempt("status", self._status), GameStatus.default)

    # ── Moves ────────────────────────────────────────────────────────────

    def apply_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> MoveRecord:
        """Play ``from_sq → to_sq`` on the engine board.

        Strict: an illegal request raises ``RulesViolation``.  Permissive: a
        rejected request is reported as a synthetic move and the engine board
        is left as it was, so the published board no longer follows the
        requested move.
        """
        outcome = attempt(
            "apply_move", lambda: self._push(from_sq, to_sq, promotion)
        )

        def _synthetic() -> MoveRecord:
            _LOGGER.warning(
                "State desync: %s-%s was rejected by the engine; "
                "reporting a synthetic move without updating the engine board",
                from_sq,
                to_sq,
            )
            return MoveRecord.synthetic_move(
                from_sq, to_sq, promotion, self.fen(), color=self._last_turn
            )

        return self._settle(outcome, _synthetic)

    def undo(self) -> MoveRecord | None:
        """Take back the last engine move; ``None`` when there is none."""
        return self._settle(attempt("undo", self._pop), lambda: None)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _settle(self, outcome: Outcome[T], fallback: Callable[[], T]) -> T:
        """Unwrap *outcome* according to the validation mode."""
        if outcome.is_ok:
            return outcome.value  # type: ignore[return-value]
        if self._mode is ValidationMode.STRICT:
            return outcome.unwrap()
        _LOGGER.warning("Ignoring rules engine failure: %s", outcome.error)
        return fallback()

    def _push(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None,
    ) -> MoveRecord:
        board = self._board
        origin = to_chess_square(parse_square(from_sq))
        target = to_chess_square(parse_square(to_sq))
        move = board.find_move(
            origin, target, int(promotion) if promotion is not None else None
        )

        piece_type = board.piece_type_at(move.from_square)
        if piece_type is None:
            raise RulesViolation(f"No piece on {from_sq}", operation="apply_move")
        color = Color.from_chess(board.turn)
        if board.is_en_passant(move):
            captured: PieceType | None = PieceType.PAWN
        else:
            captured_type = board.piece_type_at(move.to_square)
            captured = PieceType(captured_type) if captured_type else None

        record_flags = _flags(board, move, piece_type)
        san = board.san(move)
        before = board.fen()
        board.push(move)
        self._last_turn = color.opposite

        return MoveRecord(
            from_sq=from_chess_square(move.from_square),
            to_sq=from_chess_square(move.to_square),
            piece=PieceType(piece_type),
            color=color,
            san=san,
            lan=move.uci(),
            flags=record_flags,
            before=before,
            after=board.fen(),
            promotion=PieceType(move.promotion) if move.promotion else None,
            captured=captured,
        )

    def _pop(self) -> MoveRecord | None:
        board = self._board
        if not board.move_stack:
            return None
        after = board.fen()
        move = board.pop()
        self._last_turn = Color.from_chess(board.turn)
        piece_type = board.piece_type_at(move.from_square) or chess.PAWN
        captured_type = board.piece_type_at(move.to_square)
        return MoveRecord(
            from_sq=from_chess_square(move.from_square),
            to_sq=from_chess_square(move.to_square),
            piece=PieceType(piece_type),
            color=Color.from_chess(board.turn),
            san=board.san(move),
            lan=move.uci(),
            flags=_flags(board, move, piece_type),
            before=board.fen(),
            after=after,
            promotion=PieceType(move.promotion) if move.promotion else None,
            captured=PieceType(captured_type) if captured_type else None,
        )

    def _status(self) -> GameStatus:
        board = self._board
        checkmate = board.is_checkmate()
        stalemate = board.is_stalemate()
        threefold = board.is_repetition(3)
        insufficient = board.is_insufficient_material()
        draw = board.halfmove_clock >= 100 or stalemate or threefold or insufficient
        return GameStatus(
            is_check=board.is_check(),
            is_checkmate=checkmate,
            is_draw=draw,
            is_stalemate=stalemate,
            is_threefold_repetition=threefold,
            is_insufficient_material=insufficient,
            is_game_over=checkmate or draw,
            fen=board.fen(),
        )


def _flags(board: chess.Board, move: chess.Move, piece_type: int) -> str:
    """Flag letters for *move*, evaluated before it is pushed."""
    flags = ""
    if board.is_en_passant(move):
        flags += FLAG_EN_PASSANT
    elif board.is_capture(move):
        flags += FLAG_CAPTURE
    if move.promotion:
        flags += FLAG_PROMOTION
    if board.is_kingside_castling(move):
        flags += FLAG_KINGSIDE_CASTLE
    elif board.is_queenside_castling(move):
        flags += FLAG_QUEENSIDE_CASTLE
    if (
        piece_type == chess.PAWN
        and abs(chess.square_rank(move.to_square) - chess.square_rank(move.from_square))
        == 2
    ):
        flags += FLAG_BIG_PAWN
    return flags or FLAG_NORMAL
