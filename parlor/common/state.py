"""
This module contains the Scoreboard class, which keeps the running score of a
series of rounds between the same participants.

Scores only ever go up. A score is reset only when a whole new game starts.
"""
from typing import Any, Dict, Hashable, Iterable, Optional


class Scoreboard:
    """
    Per-participant win counters, plus ties and rounds played.

    :param participants: The participants being scored. Any hashable works;
                         names are taken from a `name` attribute when present.
    """

    def __init__(self, participants: Iterable[Hashable]):
        self.participants = tuple(participants)
        self.wins: Dict[Hashable, int] = {p: 0 for p in self.participants}
        self.current_streak: Dict[Hashable, int] = {p: 0 for p in self.participants}
        self.max_streak: Dict[Hashable, int] = {p: 0 for p in self.participants}
        self.ties = 0
        self.rounds_played = 0

    def record(self, winner: Optional[Hashable]) -> None:
        """
        Record the result of one round.

        :param winner: The participant who won, or None for a tie
        """
        if winner is not None and winner not in self.wins:
            raise KeyError(f"{winner!r} is not on this scoreboard")

        self.rounds_played += 1
        if winner is None:
            self.ties += 1
            for participant in self.participants:
                self.current_streak[participant] = 0
            return

        self.wins[winner] += 1
        for participant in self.participants:
            if participant == winner:
                self.current_streak[participant] += 1
                self.max_streak[participant] = max(
                    self.max_streak[participant], self.current_streak[participant]
                )
            else:
                self.current_streak[participant] = 0

    def score(self, participant: Hashable) -> int:
        return self.wins[participant]

    def leader(self, threshold: int) -> Optional[Hashable]:
        """
        Return the participant whose score has reached `threshold`, if any.
        """
        for participant in self.participants:
            if self.wins[participant] >= threshold:
                return participant
        return None

    def reset(self) -> None:
        """Zero every counter for a new game."""
        for participant in self.participants:
            self.wins[participant] = 0
            self.current_streak[participant] = 0
            self.max_streak[participant] = 0
        self.ties = 0
        self.rounds_played = 0

    @staticmethod
    def _label(participant: Hashable) -> str:
        return str(getattr(participant, "name", participant))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rounds_played": self.rounds_played,
            "ties": self.ties,
            "wins": {self._label(p): self.wins[p] for p in self.participants},
            "max_streak": {
                self._label(p): self.max_streak[p] for p in self.participants
            },
        }

    def summary(self) -> str:
        """Human-readable statistics, one line per participant."""
        lines = [f"Rounds Played: {self.rounds_played}"]
        for participant in self.participants:
            wins = self.wins[participant]
            pct = (wins / self.rounds_played * 100) if self.rounds_played else 0.0
            lines.append(
                f"{self._label(participant)} won {wins} times ({pct:.2f}%), "
                f"longest streak {self.max_streak[participant]}"
            )
        lines.append(f"Ties: {self.ties}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return " | ".join(
            f"{self._label(p)}'s score: {self.wins[p]}" for p in self.participants
        )
