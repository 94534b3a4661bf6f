"""Records stored in the user progress database."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameProgress:
    """Overall player progression."""

    id: int = 0
    coins: int = 0
    level_xp: int = 0
    level: int = 0


@dataclass
class MapInfo:
    """A playable map."""

    id: int = 0
    name: str = ""


@dataclass
class MapProgress:
    """Best wave reached on a map."""

    map_id: int = 0
    max_wave: int = 0


@dataclass
class TowerUnlock:
    """A tower and the player level that unlocks it."""

    id: int = 0
    name: str = ""
    require_level: int = 0
    unlocked: bool = False