"""
This module contains the IOInterface abstract base class and its implementations.

The game controllers never read or print anything themselves. Every decision
that needs a person goes through one of the ``request_*`` methods, and every
change the person should see is pushed through ``report_state`` or
``report_result``. The request methods block until an answer is available.

What counts as a well-formed answer:

- ``request_name``: a non-empty string.
- ``request_hit_or_stay``: ``Action.HIT`` or ``Action.STAY``.
- ``request_square``: an int in 1..9 naming an unmarked square. The board
  re-validates and raises if it is not.
- ``request_marker_choice``: ``Marker.X`` or ``Marker.O``.
- ``request_first_mover``: ``FirstMover.HUMAN``, ``COMPUTER`` or ``RANDOM``.
- ``request_continue``: a bool.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, List

from parlor.tictactoe.board import Marker
from parlor.tictactoe.rules import FirstMover
from parlor.twenty_one.action import Action

if TYPE_CHECKING:
    from parlor.tictactoe.board import Board


class ContinuePrompt(Enum):
    """The yes/no questions asked between rounds and matches."""

    NEXT_ROUND = "Would you like to start the next round?"
    PLAY_AGAIN = "Would you like to play again?"


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations in the games.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def request_name(self) -> str:
        """Ask the human for their name."""
        pass

    @abstractmethod
    def request_hit_or_stay(self, view: Any) -> Action:
        """Ask the human whether to take another card."""
        pass

    @abstractmethod
    def request_square(self, board: Board) -> int:
        """Ask the human which square to mark."""
        pass

    @abstractmethod
    def request_marker_choice(self) -> Marker:
        """Ask the human which marker they want to play."""
        pass

    @abstractmethod
    def request_first_mover(self) -> FirstMover:
        """Ask the human who moves first."""
        pass

    @abstractmethod
    def request_continue(self, prompt: ContinuePrompt) -> bool:
        """Ask the human a yes/no continuation question."""
        pass

    @abstractmethod
    def report_state(self, state: Any) -> None:
        """Show a snapshot of the table or board."""
        pass

    @abstractmethod
    def report_result(self, result: Any) -> None:
        """Show the outcome of a round or match."""
        pass

    def report_error(self, message: str) -> None:
        """Tell the human their last answer was rejected."""
        self.output(message)


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.

    Answers every request with a fixed default: stay, the lowest unmarked
    square, marker X, a random first mover and never continue.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def request_name(self) -> str:
        return "Player"

    def request_hit_or_stay(self, view: Any) -> Action:
        return Action.STAY

    def request_square(self, board: Board) -> int:
        unmarked = board.unmarked_positions()
        if not unmarked:
            raise ValueError("No unmarked squares available.")
        return unmarked[0]

    def request_marker_choice(self) -> Marker:
        return Marker.X

    def request_first_mover(self) -> FirstMover:
        return FirstMover.RANDOM

    def request_continue(self, prompt: ContinuePrompt) -> bool:
        return False

    def report_state(self, state: Any) -> None:
        pass

    def report_result(self, result: Any) -> None:
        pass


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Answers requests from scripted
    queues and collects everything the games report.

    Running out of scripted hit/stay decisions, squares, markers or first
    movers raises ValueError. Names default to "Tester" and continuation
    questions default to False so that game loops terminate.
    """

    __test__ = False

    def __init__(
        self,
        names: Iterable[str] = (),
        actions: Iterable[Action] = (),
        squares: Iterable[int] = (),
        markers: Iterable[Marker] = (),
        first_movers: Iterable[FirstMover] = (),
        continues: Iterable[bool] = (),
    ):
        self.names: List[str] = list(names)
        self.actions: List[Action] = list(actions)
        self.squares: List[int] = list(squares)
        self.markers: List[Marker] = list(markers)
        self.first_movers: List[FirstMover] = list(first_movers)
        self.continues: List[bool] = list(continues)

        self.sent_messages: List[str] = []
        self.states: List[Any] = []
        self.results: List[Any] = []
        self.errors: List[str] = []
        self.prompts: List[ContinuePrompt] = []

    @staticmethod
    def _pop(queue: list, what: str):
        if not queue:
            raise ValueError(f"No more {what} left in TestIOInterface queue.")
        return queue.pop(0)

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def request_name(self) -> str:
        if self.names:
            return self.names.pop(0)
        return "Tester"

    def request_hit_or_stay(self, view: Any) -> Action:
        return self._pop(self.actions, "actions")

    def request_square(self, board: Board) -> int:
        return self._pop(self.squares, "squares")

    def request_marker_choice(self) -> Marker:
        return self._pop(self.markers, "markers")

    def request_first_mover(self) -> FirstMover:
        return self._pop(self.first_movers, "first movers")

    def request_continue(self, prompt: ContinuePrompt) -> bool:
        self.prompts.append(prompt)
        if self.continues:
            return self.continues.pop(0)
        return False

    def report_state(self, state: Any) -> None:
        self.states.append(state)

    def report_result(self, result: Any) -> None:
        self.results.append(result)

    def report_error(self, message: str) -> None:
        self.errors.append(message)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.

    Malformed answers are rejected here and the question is asked again, so
    only well-formed answers reach the games.
    """

    def output(self, message: str) -> None:
        print(message)

    def _ask(self, prompt: str, choices: dict, error: str):
        while True:
            answer = input(f"{prompt} ").strip().lower()
            if answer in choices:
                return choices[answer]
            print(error)

    def request_name(self) -> str:
        while True:
            name = input("What's your name? ").strip()
            if name:
                return name
            print("Sorry, you must enter a value.")

    def request_hit_or_stay(self, view: Any) -> Action:
        return self._ask(
            "(h)it or (s)tay?",
            {"h": Action.HIT, "hit": Action.HIT, "s": Action.STAY, "stay": Action.STAY},
            "That's not a valid answer. Please enter h or s.",
        )

    def request_square(self, board: Board) -> int:
        unmarked = board.unmarked_positions()
        while True:
            answer = input(f"Choose a square ({joinor(unmarked)}): ").strip()
            if answer.isdigit() and int(answer) in unmarked:
                return int(answer)
            print("Sorry, that's not a valid choice.")

    def request_marker_choice(self) -> Marker:
        return self._ask(
            "Pick your marker: X or O",
            {"x": Marker.X, "o": Marker.O},
            "Sorry, that is not a valid choice.",
        )

    def request_first_mover(self) -> FirstMover:
        return self._ask(
            "Choose the first player to move: (y)ou, (c)omputer or (r)andom",
            {"y": FirstMover.HUMAN, "c": FirstMover.COMPUTER, "r": FirstMover.RANDOM},
            "Sorry, that's not a valid choice. Enter y, c, or r.",
        )

    def request_continue(self, prompt: ContinuePrompt) -> bool:
        return self._ask(
            f"{prompt.value} (y/n)",
            {"y": True, "yes": True, "n": False, "no": False},
            "Sorry, must be y or n.",
        )

    def report_state(self, state: Any) -> None:
        print(state)
        print()

    def report_result(self, result: Any) -> None:
        print(result)
        print()


def joinor(items: List[Any], delimiter: str = ", ", word: str = "or") -> str:
    """
    Join items for a prompt, putting `word` before the last one.

    >>> joinor([1, 2, 3])
    '1, 2, or 3'
    >>> joinor([1, 2])
    '1 or 2'
    """
    words = [str(item) for item in items]
    if len(words) > 1:
        words[-1] = f"{word} {words[-1]}"
    if len(words) == 2:
        return " ".join(words)
    return delimiter.join(words)
