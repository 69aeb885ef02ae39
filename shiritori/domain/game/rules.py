# shiritori/domain/game/rules.py
from __future__ import annotations

from typing import Mapping, Optional, Sequence

from shiritori.domain.common.types import PlayerT

# Shiritori Constants
MINIMUM_PLAYER_COUNT = 2


def validate_start_conditions(players: Sequence[PlayerT]) -> tuple[bool, Optional[str]]:
    """
    Check if a lobby can start a game.
    Returns (can_start, error_message)
    """
    if len(players) < MINIMUM_PLAYER_COUNT:
        return False, f"not enough players (need at least {MINIMUM_PLAYER_COUNT}, have {len(players)})"
    return True, None


def alive_players(alive_states: Mapping[PlayerT, bool]) -> list[PlayerT]:
    """Alive players, in the order they joined."""
    return [p for p, alive in alive_states.items() if alive]


def count_alive(alive_states: Mapping[PlayerT, bool]) -> int:
    return sum(1 for alive in alive_states.values() if alive)


def is_game_over(alive_states: Mapping[PlayerT, bool]) -> bool:
    return count_alive(alive_states) == 1


def next_alive_player(
    order: Sequence[PlayerT],
    alive_states: Mapping[PlayerT, bool],
    current: PlayerT,
) -> PlayerT:
    """
    Walk the join order circularly from `current` and return the first
    alive player after it. Linear in the number of players.

    Caller guarantees some other player is still alive.
    """
    n = len(order)
    index = order.index(current)
    for step in range(1, n):
        candidate = order[(index + step) % n]
        if alive_states.get(candidate):
            return candidate
    raise ValueError("no alive player to rotate to")
