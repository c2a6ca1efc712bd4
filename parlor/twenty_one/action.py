"""Defines the Action enum for the decisions a participant makes on their turn in Twenty-One."""
from enum import Enum


class Action(Enum):
    """Enum for the possible actions on a Twenty-One turn."""

    HIT = "hit"
    STAY = "stay"
