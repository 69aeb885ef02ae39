# shiritori/domain/common/types.py
from __future__ import annotations

from typing import Hashable, Literal, TypeVar

GamePhase = Literal["lobbying", "playing", "finished"]

# Players and words only need equality + hashing (they live in sets/dicts).
PlayerT = TypeVar("PlayerT", bound=Hashable)
WordT = TypeVar("WordT", bound=Hashable)
