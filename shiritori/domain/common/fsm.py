# shiritori/domain/common/fsm.py
from __future__ import annotations

from shiritori.domain.common.types import GamePhase


def can_transition_to(current: GamePhase, target: GamePhase) -> bool:
    """
    Validate phase transitions. Phases only ever move forward.
    """
    transitions: dict[GamePhase, list[GamePhase]] = {
        "lobbying": ["playing"],
        "playing": ["finished"],
        "finished": [],
    }
    return target in transitions.get(current, [])
