# shiritori/domain/game/running.py
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Generic, Iterable, Mapping

from shiritori.domain.common.errors import DuplicateWord, GameEnded, GameNotEnded, PlayerNotAlive
from shiritori.domain.common.fsm import can_transition_to
from shiritori.domain.common.types import GamePhase, PlayerT, WordT
from shiritori.domain.game.finished import FinishedGame
from shiritori.domain.game.rules import alive_players, is_game_over, next_alive_player

logger = logging.getLogger(__name__)


class RunningGame(Generic[PlayerT, WordT]):
    """
    A game in the playing state: owns turn order, the word log and who is
    still alive. Do not build directly; use `LobbyingGame.start_game()`.

        running.add_word("word1")
        running.kill_current_player()
        finished = running.get_finished_game()

    Once `get_finished_game()` has handed the collections over, this object
    is spent and every further turn operation raises `GameEnded`.
    """

    def __init__(self, players: Iterable[PlayerT]):
        self.state: GamePhase = "playing"

        # Frozen join order; nobody joins mid-game.
        self._players: tuple[PlayerT, ...] = tuple(dict.fromkeys(players))
        self._words: dict[WordT, None] = {}
        self._alive: dict[PlayerT, bool] = {p: True for p in self._players}

        self._current_player: PlayerT = self._players[0]

    # ----------------------------
    # Read-only views
    # ----------------------------
    @property
    def players(self) -> tuple[PlayerT, ...]:
        return self._players

    @property
    def words(self) -> tuple[WordT, ...]:
        return tuple(self._words)

    @property
    def player_alive_states(self) -> Mapping[PlayerT, bool]:
        return MappingProxyType(self._alive)

    @property
    def current_player(self) -> PlayerT:
        return self._current_player

    @property
    def alive_players(self) -> list[PlayerT]:
        return alive_players(self._alive)

    # ----------------------------
    # Turn operations
    # ----------------------------
    def _ensure_running(self) -> None:
        if self.state != "playing" or self.has_game_ended():
            logger.warning("Rejected turn operation: game has ended")
            raise GameEnded()

    def add_word(self, word: WordT) -> None:
        """Record the current player's word and pass the turn on."""
        self._ensure_running()

        if not self._alive.get(self._current_player):
            logger.warning(f"Rejected word {word!r}: {self._current_player!r} is dead")
            raise PlayerNotAlive()
        if word in self._words:
            logger.warning(f"Rejected word {word!r}: already used")
            raise DuplicateWord()

        self._words[word] = None
        logger.debug(f"{self._current_player!r} played {word!r}")

        self.select_next_player()

    def select_next_player(self) -> None:
        self._ensure_running()

        previous = self._current_player
        self._current_player = next_alive_player(self._players, self._alive, previous)
        logger.debug(f"Turn passes from {previous!r} to {self._current_player!r}")

    def kill_current_player(self) -> None:
        """
        Eliminate the current player. When only one player is left the turn
        is not rotated, so `current_player` still names the eliminated one.
        """
        self._ensure_running()

        self._alive[self._current_player] = False
        logger.info(f"Player {self._current_player!r} eliminated ({len(self.alive_players)} left)")

        if self.has_game_ended():
            logger.info("Game over")
            return

        self.select_next_player()

    def has_game_ended(self) -> bool:
        return is_game_over(self._alive)

    def get_finished_game(self) -> FinishedGame[PlayerT, WordT]:
        if not can_transition_to(self.state, "finished"):
            logger.warning("Rejected finish: game was already finalized")
            raise GameEnded()
        if not self.has_game_ended():
            raise GameNotEnded()

        self.state = "finished"
        return FinishedGame(self._players, self._words, self._alive)
