"""Square type alias and coordinate helpers.

Squares are algebraic labels, ``"a1"`` … ``"h8"``.  Files and ranks are
handled as zero-based indices internally:

    file_index("a4") == 0, rank_index("a4") == 3
"""

from __future__ import annotations

from typing import TypeAlias

import chess

Square: TypeAlias = str  # "a1"–"h8"

FILES = "abcdefgh"
RANKS = "12345678"


def file_index(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return FILES.index(sq[0])


def rank_index(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return RANKS.index(sq[1])


def rank_number(sq: Square) -> int:
    """Rank number 1–8 as printed on the board."""
    return rank_index(sq) + 1


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    if not (0 <= file < 8 and 0 <= rank < 8):
        raise ValueError(f"Square out of range: file={file}, rank={rank}")
    return FILES[file] + RANKS[rank]


def is_valid_square(name: object) -> bool:
    """Check whether *name* is one of the 64 square labels."""
    return (
        isinstance(name, str)
        and len(name) == 2
        and name[0] in FILES
        and name[1] in RANKS
    )


def parse_square(name: str) -> Square:
    """Validate and normalise a square label, e.g. ``'E4'`` → ``'e4'``."""
    label = name.strip().lower() if isinstance(name, str) else name
    if not is_valid_square(label):
        raise ValueError(f"Invalid square name: {name!r}")
    return label


def to_chess_square(sq: Square) -> chess.Square:
    """Square label → python-chess square index."""
    return chess.square(file_index(sq), rank_index(sq))


def from_chess_square(index: chess.Square) -> Square:
    """python-chess square index → square label."""
    return chess.square_name(index)


ALL_SQUARES: tuple[Square, ...] = tuple(
    make_square(f, r) for r in range(8) for f in range(8)
)
