# shiritori/domain/game/lobby.py
from __future__ import annotations

import logging
from typing import Generic

from shiritori.domain.common.errors import GameAlreadyStarted, InsufficientPlayers
from shiritori.domain.common.fsm import can_transition_to
from shiritori.domain.common.types import GamePhase, PlayerT, WordT
from shiritori.domain.game.rules import validate_start_conditions
from shiritori.domain.game.running import RunningGame

logger = logging.getLogger(__name__)


class Game(Generic[PlayerT, WordT]):
    """
    Entry point for a game of Shiritori.

        game = Game[str, str]()
        lobby = game.start_lobby()
    """

    def start_lobby(self) -> LobbyingGame[PlayerT, WordT]:
        logger.info("Lobby opened")
        return LobbyingGame()


class LobbyingGame(Generic[PlayerT, WordT]):
    """
    A game that is still collecting players.
    Do not build directly; use `Game.start_lobby()`.

        lobby.add_player("player1")
        lobby.add_player("player2")
        running = lobby.start_game()
    """

    def __init__(self) -> None:
        self.state: GamePhase = "lobbying"
        # dict keys double as an insertion-ordered set
        self._players: dict[PlayerT, None] = {}

    @property
    def players(self) -> tuple[PlayerT, ...]:
        return tuple(self._players)

    def _ensure_lobbying(self) -> None:
        if not can_transition_to(self.state, "playing"):
            logger.warning("Rejected lobby operation: game already started")
            raise GameAlreadyStarted()

    def add_player(self, player: PlayerT) -> None:
        self._ensure_lobbying()

        if player in self._players:
            logger.debug(f"Player {player!r} already in lobby")
            return
        self._players[player] = None
        logger.debug(f"Player {player!r} joined lobby ({len(self._players)} players)")

    def start_game(self) -> RunningGame[PlayerT, WordT]:
        self._ensure_lobbying()

        ok, err = validate_start_conditions(self.players)
        if not ok:
            logger.warning(f"Cannot start game: {err}")
            raise InsufficientPlayers()

        logger.info(f"Starting game with {len(self._players)} players")
        self.state = "playing"
        return RunningGame(self.players)
