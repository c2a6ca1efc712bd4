"""
The Tic-Tac-Toe board.

Squares are keyed 1..9, left to right and top to bottom::

    1 | 2 | 3
    4 | 5 | 6
    7 | 8 | 9

A square is marked at most once per round. Only `Board.reset` clears it.
"""

import logging
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

POSITIONS = tuple(range(1, 10))

CENTER = 5

# Scan order matters: rows, then columns, then diagonals
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    (1, 4, 7),
    (2, 5, 8),
    (3, 6, 9),
    (1, 5, 9),
    (3, 5, 7),
)


class InvalidPositionError(ValueError):
    """Raised when a move names a square that does not exist."""

    pass


class PositionOccupiedError(ValueError):
    """Raised when a move names a square that is already marked."""

    pass


class Marker(Enum):
    """The two player markers."""

    X = "X"
    O = "O"  # noqa: E741

    @property
    def opponent(self) -> "Marker":
        return Marker.O if self is Marker.X else Marker.X

    def __str__(self) -> str:
        return self.value


class Square:
    """A single board square: unmarked, or holding one marker."""

    INITIAL_MARKER = " "

    __slots__ = ("marker",)

    def __init__(self, marker: Optional[Marker] = None):
        self.marker = marker

    @property
    def is_marked(self) -> bool:
        return self.marker is not None

    @property
    def is_unmarked(self) -> bool:
        return self.marker is None

    def __repr__(self) -> str:
        return f"Square({self.marker!r})"

    def __str__(self) -> str:
        return str(self.marker) if self.marker else self.INITIAL_MARKER


def draw(squares: Mapping[int, Optional[str]]) -> str:
    """
    Draw a 3x3 grid from a mapping of position to marker text (None when unmarked).
    """
    rows = []
    for start in (1, 4, 7):
        cells = [
            squares.get(pos) or Square.INITIAL_MARKER
            for pos in range(start, start + 3)
        ]
        rows.append(
            "\n".join(
                [
                    "     |     |",
                    f"  {cells[0]}  |  {cells[1]}  |  {cells[2]}",
                    "     |     |",
                ]
            )
        )
    return "\n-----+-----+-----\n".join(rows)


class Board:
    """
    Nine squares and the rules for marking them.

    >>> board = Board()
    >>> board.place(5, Marker.X)
    >>> board.unmarked_positions()
    [1, 2, 3, 4, 6, 7, 8, 9]
    >>> board.winning_marker() is None
    True
    """

    def __init__(self):
        self._squares: Dict[int, Square] = {}
        self.reset()

    def reset(self) -> None:
        """Clear every square for a new round."""
        self._squares = {position: Square() for position in POSITIONS}

    @staticmethod
    def validate_position(position) -> int:
        """
        Check that `position` names a square.

        :raises InvalidPositionError: If it is not an int in 1..9
        """
        if isinstance(position, bool) or not isinstance(position, int):
            raise InvalidPositionError(f"Position must be an integer, got {position!r}")
        if position not in POSITIONS:
            raise InvalidPositionError(f"Position {position} is not between 1 and 9")
        return position

    def place(self, position: int, marker: Marker) -> None:
        """
        Mark a square.

        :raises InvalidPositionError: If the square does not exist
        :raises PositionOccupiedError: If the square is already marked
        """
        if not isinstance(marker, Marker):
            raise TypeError(f"Invalid marker: {marker!r}")
        square = self._squares[self.validate_position(position)]
        if square.is_marked:
            raise PositionOccupiedError(
                f"Square {position} is already marked with {square.marker}"
            )
        square.marker = marker
        logger.debug("%s placed on square %d", marker, position)

    def __getitem__(self, position: int) -> Optional[Marker]:
        return self._squares[self.validate_position(position)].marker

    def markers(self, positions) -> List[Optional[Marker]]:
        return [self._squares[position].marker for position in positions]

    def unmarked_positions(self) -> List[int]:
        return [pos for pos, square in self._squares.items() if square.is_unmarked]

    @property
    def is_full(self) -> bool:
        return not self.unmarked_positions()

    def winning_marker(self) -> Optional[Marker]:
        """
        Return the marker filling a whole winning line, or None.
        """
        for line in WINNING_LINES:
            first, *rest = self.markers(line)
            if first is not None and all(marker is first for marker in rest):
                return first
        return None

    @property
    def has_winner(self) -> bool:
        return self.winning_marker() is not None

    @property
    def is_terminal(self) -> bool:
        """True when the round is over: someone won or no square is left."""
        return self.has_winner or self.is_full

    def to_dict(self) -> Dict[int, Optional[str]]:
        return {
            position: (square.marker.value if square.marker else None)
            for position, square in self._squares.items()
        }

    def render(self) -> str:
        """Draw the board as text."""
        return draw(self.to_dict())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board({self.to_dict()!r})"
