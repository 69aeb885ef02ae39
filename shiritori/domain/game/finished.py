# shiritori/domain/game/finished.py
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Generic, Mapping, Sequence

from shiritori.domain.common.errors import NoAliveWinner
from shiritori.domain.common.types import GamePhase, PlayerT, WordT
from shiritori.domain.game.rules import alive_players

logger = logging.getLogger(__name__)


class FinishedGame(Generic[PlayerT, WordT]):
    """
    Terminal, read-only snapshot of a game. Built by
    `RunningGame.get_finished_game()`, which hands over its collections.

        finished = running.get_finished_game()
        print(finished.winner)
    """

    def __init__(
        self,
        players: Sequence[PlayerT],
        words: Mapping[WordT, None],
        player_alive_states: Mapping[PlayerT, bool],
    ):
        self.state: GamePhase = "finished"

        self._players = players
        self._words = words
        self._alive = player_alive_states

        survivors = alive_players(self._alive)
        if len(survivors) != 1:
            logger.error(f"Finished game has {len(survivors)} alive players")
            raise NoAliveWinner(f"expected exactly one alive player, found {len(survivors)}")
        self._winner: PlayerT = survivors[0]

        logger.info(f"Game finished, winner {self._winner!r} after {len(self._words)} words")

    @property
    def players(self) -> tuple[PlayerT, ...]:
        return tuple(self._players)

    @property
    def words(self) -> tuple[WordT, ...]:
        return tuple(self._words)

    @property
    def player_alive_states(self) -> Mapping[PlayerT, bool]:
        return MappingProxyType(self._alive)

    @property
    def winner(self) -> PlayerT:
        return self._winner
