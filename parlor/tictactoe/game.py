"""
Round and match controller for Tic-Tac-Toe.

Turns follow the marker, not a player index: whoever holds `current_marker`
moves, then the marker flips. A round ends on a win or a full board; a win on
the last square counts as a win. A match is a run of rounds that ends when a
score reaches the rules' win score or the human declines the next round. The
first mover is settled once per match and restored at the start of every
round.

Run ``tictactoe`` (or ``python -m parlor.tictactoe.game``) to play in a
terminal, or ``tictactoe --simulate 100`` for a non-interactive run.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from parlor.common.io_interface import (
    ConsoleIOInterface,
    ContinuePrompt,
    DummyIOInterface,
    IOInterface,
)
from parlor.common.state import Scoreboard
from parlor.events import EngineEventType, EventBus
from parlor.tictactoe.actor import MarkerParticipant, make_computer, make_human
from parlor.tictactoe.board import (
    Board,
    InvalidPositionError,
    Marker,
    PositionOccupiedError,
)
from parlor.tictactoe.rules import FirstMover, MatchRules
from parlor.tictactoe.state import BoardView, MatchResult, RoundOutcome, RoundResult

logger = logging.getLogger(__name__)


class TicTacToeGame:
    """
    The human against the heuristic computer opponent.

    :param io_interface: Where decisions come from and results go to
    :param rules: Match rules; defaults when omitted
    :param rng: Random source for names, the random first mover and the
                computer's fallback moves
    :param human: Pre-built human participant; seated through `io_interface` otherwise
    :param computer: Pre-built computer participant
    """

    def __init__(
        self,
        io_interface: IOInterface,
        rules: Optional[MatchRules] = None,
        rng: Optional[random.Random] = None,
        human: Optional[MarkerParticipant] = None,
        computer: Optional[MarkerParticipant] = None,
    ):
        self.io_interface = io_interface
        self.rules = rules or MatchRules()
        self.rng = rng or random.Random()
        self.event_bus = EventBus.get_instance()

        self.board = Board()
        self.human = human or make_human(io_interface)
        self.computer = computer or make_computer(self.rules, self.rng)
        self.scoreboard = Scoreboard((self.human, self.computer))

        self.first_marker: Optional[Marker] = None
        self.current_marker: Optional[Marker] = None
        self.round_number = 0

    @property
    def participants(self) -> List[MarkerParticipant]:
        return [self.human, self.computer]

    def participant_for(self, marker: Marker) -> MarkerParticipant:
        for participant in self.participants:
            if participant.marker is marker:
                return participant
        raise KeyError(f"Nobody is playing {marker}")

    @property
    def current_participant(self) -> MarkerParticipant:
        if self.current_marker is None:
            raise RuntimeError("No match in progress; call setup_match() first")
        return self.participant_for(self.current_marker)

    def resolve_first_mover(self) -> Marker:
        """
        Work out which marker opens the rounds of this match.
        """
        choice = self.rules.first_to_move
        if choice is FirstMover.CHOOSE:
            choice = self.io_interface.request_first_mover()

        match choice:
            case FirstMover.HUMAN:
                return self.human.marker
            case FirstMover.COMPUTER:
                return self.computer.marker
            case FirstMover.RANDOM:
                return self.rng.choice([self.human.marker, self.computer.marker])
            case _:
                raise ValueError(f"Invalid first mover: {choice!r}")

    def setup_match(self) -> None:
        """
        Prepare a new match: new computer name, markers, first mover, zeroed
        scores and an empty board.
        """
        self.computer.repick_name()

        marker = self.io_interface.request_marker_choice()
        if not isinstance(marker, Marker):
            raise ValueError(f"Invalid marker choice: {marker!r}")
        self.human.marker = marker
        self.computer.marker = marker.opponent

        self.first_marker = self.resolve_first_mover()
        self.current_marker = self.first_marker
        self.scoreboard.reset()
        self.board.reset()
        self.round_number = 1

        self.io_interface.output(
            f"Hi {self.human.name}! Your opponent is {self.computer.name}. "
            f"First to win {self.rules.win_score} rounds is the winner."
        )
        self.event_bus.emit(
            EngineEventType.GAME_STARTED,
            {
                "human": self.human.name,
                "human_marker": self.human.marker.value,
                "computer": self.computer.name,
                "computer_marker": self.computer.marker.value,
                "first_marker": self.first_marker.value,
                "win_score": self.rules.win_score,
            },
        )
        logger.info(
            "Match: %s (%s) vs %s (%s), %s opens",
            self.human.name,
            self.human.marker,
            self.computer.name,
            self.computer.marker,
            self.first_marker,
        )

    def reset_round(self) -> None:
        """Clear the board and give the opening move back to the first mover."""
        self.board.reset()
        self.current_marker = self.first_marker
        self.round_number += 1

    def view(self) -> BoardView:
        return BoardView(
            squares=self.board.to_dict(),
            human_name=self.human.name,
            human_marker=self.human.marker,
            computer_name=self.computer.name,
            computer_marker=self.computer.marker,
            current_marker=self.current_marker,
            round_number=self.round_number,
        )

    def play_turn(self) -> int:
        """
        Let the participant holding the current marker make one move.

        A rejected square raises before anything changes, including whose
        turn it is.

        :return: The position that was marked
        :raises InvalidPositionError: If the chosen square does not exist
        :raises PositionOccupiedError: If the chosen square is taken
        """
        mover = self.current_participant
        position = mover.next_move(self.board)
        self.board.place(position, mover.marker)
        self.event_bus.emit(
            EngineEventType.MOVE_MADE,
            {
                "participant": mover.name,
                "marker": mover.marker.value,
                "position": position,
            },
        )
        self.current_marker = self.current_marker.opponent
        return position

    def _scores(self):
        return tuple((p.name, self.scoreboard.score(p)) for p in self.participants)

    def play_round(self) -> RoundResult:
        """
        Play moves until someone wins or the board is full, then score the round.
        """
        mover = self.current_participant
        self.event_bus.emit(
            EngineEventType.ROUND_STARTED,
            {"round_number": self.round_number, "first_marker": mover.marker.value},
        )
        self.io_interface.report_state(self.view())

        while not self.board.is_terminal:
            mover = self.current_participant
            try:
                self.play_turn()
            except (InvalidPositionError, PositionOccupiedError) as exc:
                if not mover.is_human:
                    raise
                logger.debug("Rejected move from %s: %s", mover.name, exc)
                self.event_bus.emit(
                    EngineEventType.MOVE_REJECTED,
                    {"participant": mover.name, "reason": str(exc)},
                )
                self.io_interface.report_error(f"Sorry, that's not a valid choice. {exc}")
                continue

            self.io_interface.report_state(self.view())

        winning_marker = self.board.winning_marker()
        if winning_marker is None:
            winner = None
            outcome = RoundOutcome.TIE
        else:
            winner = self.participant_for(winning_marker)
            outcome = (
                RoundOutcome.HUMAN_WIN if winner.is_human else RoundOutcome.COMPUTER_WIN
            )
        self.scoreboard.record(winner)

        match_winner = self.scoreboard.leader(self.rules.win_score)
        result = RoundResult(
            outcome=outcome,
            winning_marker=winning_marker,
            winner_name=winner.name if winner else None,
            scores=self._scores(),
            match_winner_name=match_winner.name if match_winner else None,
        )

        self.io_interface.report_result(result)
        self.event_bus.emit(EngineEventType.ROUND_ENDED, result.to_dict())
        logger.info("Round %d: %s", self.round_number, outcome.value)
        return result

    def play_match(self) -> MatchResult:
        """
        Set up a match and play rounds until it is decided or abandoned.
        """
        self.setup_match()
        abandoned = False

        while True:
            result = self.play_round()
            if result.match_winner_name is not None:
                break
            if not self.io_interface.request_continue(ContinuePrompt.NEXT_ROUND):
                abandoned = True
                break
            self.reset_round()
            self.io_interface.output("Let's start the next round!")

        winner = self.scoreboard.leader(self.rules.win_score)
        match_result = MatchResult(
            winner_name=winner.name if winner else None,
            scores=self._scores(),
            rounds_played=self.scoreboard.rounds_played,
            abandoned=abandoned,
        )
        self.event_bus.emit(EngineEventType.GAME_ENDED, match_result.to_dict())
        logger.info("Match over: %s", match_result)
        return match_result

    def play(self) -> List[MatchResult]:
        """
        Play matches until the human leaves a match early or declines another.

        Returns:
            The result of every match played
        """
        results = []
        while True:
            match_result = self.play_match()
            results.append(match_result)
            if match_result.abandoned:
                break
            if not self.io_interface.request_continue(ContinuePrompt.PLAY_AGAIN):
                break
            self.io_interface.output("Let's play again!")

        self.io_interface.output(
            f"Thanks for playing Tic Tac Toe! Goodbye {self.human.name}!"
        )
        return results


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Play Tic-Tac-Toe against the computer."
    )
    parser.add_argument(
        "-s", "--seed", type=int, default=None, help="seed for random choices"
    )
    parser.add_argument(
        "-w",
        "--win-score",
        type=int,
        default=MatchRules().win_score,
        help="rounds needed to win a match (default: %(default)s)",
    )
    parser.add_argument(
        "-f",
        "--first",
        choices=[mover.value for mover in FirstMover],
        default=FirstMover.CHOOSE.value,
        help="who moves first in each match (default: ask)",
    )
    parser.add_argument(
        "--simulate",
        type=int,
        default=0,
        metavar="ROUNDS",
        help="play ROUNDS rounds without input, the human always taking the lowest free square",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every move"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    rng = random.Random(args.seed)

    if args.simulate > 0:
        rules = MatchRules(win_score=args.simulate, first_to_move=FirstMover.RANDOM)
        game = TicTacToeGame(DummyIOInterface(), rules=rules, rng=rng)
        game.setup_match()
        for _ in range(args.simulate):
            game.play_round()
            game.reset_round()
        print(f"Finished playing {args.simulate} rounds.")
        print(game.scoreboard.summary())
        return 0

    rules = MatchRules(win_score=args.win_score, first_to_move=args.first)
    io_interface = ConsoleIOInterface()
    io_interface.output("Welcome to Tic Tac Toe!")
    try:
        game = TicTacToeGame(io_interface, rules=rules, rng=rng)
        game.play()
    except (KeyboardInterrupt, EOFError):
        io_interface.output("\nGoodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
