# shiritori/domain/common/errors.py
from __future__ import annotations


class GameError(Exception):
    """
    Base for every rule violation raised by the game core.
    `code` is stable and safe to hand to clients; `message` is for humans.
    """
    code: str = "GAME_ERROR"
    message: str = "game error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InsufficientPlayers(GameError):
    code = "NOT_ENOUGH_PLAYERS"
    message = "not enough players"


class GameAlreadyStarted(GameError):
    code = "GAME_STARTED"
    message = "game has already started"


class GameEnded(GameError):
    code = "GAME_ENDED"
    message = "game has ended"


class PlayerNotAlive(GameError):
    code = "PLAYER_DEAD"
    message = "player is dead"


class DuplicateWord(GameError):
    code = "WORD_USED"
    message = "word already used"


class GameNotEnded(GameError):
    code = "GAME_NOT_ENDED"
    message = "game has not ended"


class NoAliveWinner(GameError):
    # Only reachable if aliveness bookkeeping upstream is broken.
    code = "NO_WINNER"
    message = "expected exactly one alive player"
