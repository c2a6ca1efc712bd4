"""
The computer's Tic-Tac-Toe policy.

Moves are chosen by fixed priority:

1. offense: complete a line holding two of our markers
2. defense: block a line holding two of the opponent's markers
3. take the center
4. any unmarked square, at random

Within steps 1 and 2 the first qualifying line in scan order wins (rows,
then columns, then diagonals), so a given board always yields the same move
unless the random fallback is reached.
"""

import logging
import random
from typing import Optional

from parlor.tictactoe.board import CENTER, WINNING_LINES, Board, Marker

logger = logging.getLogger(__name__)


def find_at_risk_square(board: Board, marker: Marker) -> Optional[int]:
    """
    Find the open square of the first line that `marker` is one move from
    completing.

    :return: The square's position, or None if no line qualifies
    """
    for line in WINNING_LINES:
        markers = board.markers(line)
        if markers.count(marker) == 2 and markers.count(None) == 1:
            return line[markers.index(None)]
    return None


def choose_move(
    board: Board,
    own_marker: Marker,
    opponent_marker: Marker,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Pick the computer's square.

    :param board: The current board; not modified
    :param own_marker: The computer's marker
    :param opponent_marker: The other side's marker
    :param rng: Random source for the fallback move
    :raises ValueError: If no square is left
    """
    unmarked = board.unmarked_positions()
    if not unmarked:
        raise ValueError("No unmarked squares left to choose from")

    square = find_at_risk_square(board, own_marker)
    if square is not None:
        logger.debug("%s takes the win on %d", own_marker, square)
        return square

    square = find_at_risk_square(board, opponent_marker)
    if square is not None:
        logger.debug("%s blocks on %d", own_marker, square)
        return square

    if CENTER in unmarked:
        return CENTER

    return (rng or random.Random()).choice(unmarked)
