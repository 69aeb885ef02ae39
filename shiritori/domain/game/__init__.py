from __future__ import annotations

from .finished import FinishedGame
from .lobby import Game, LobbyingGame
from .rules import MINIMUM_PLAYER_COUNT
from .running import RunningGame

__all__ = [
    "FinishedGame",
    "Game",
    "LobbyingGame",
    "MINIMUM_PLAYER_COUNT",
    "RunningGame",
]
