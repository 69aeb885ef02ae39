# shiritori/demo.py
from __future__ import annotations

import logging

from shiritori.domain.game import FinishedGame, Game

logger = logging.getLogger(__name__)


def run_demo() -> FinishedGame[str, str]:
    """
    Scripted four player game: one word each, then the current player is
    eliminated three times in a row.
    """
    game = Game[str, str]()
    lobby = game.start_lobby()

    for player in ["a", "b", "c", "d"]:
        lobby.add_player(player)

    running = lobby.start_game()

    for word in ["wa1", "wb1", "wc1", "wd1"]:
        running.add_word(word)

    for _ in range(3):
        running.kill_current_player()
        logger.info(f"has_game_ended={running.has_game_ended()}")

    return running.get_finished_game()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    finished = run_demo()
    print(f"winner: {finished.winner}")
    print(f"words: {', '.join(finished.words)}")
