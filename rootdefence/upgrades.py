"""Tower upgrade data and its JSON form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

_STAT_NAME = "statName"
_VALUES = "values"
_COSTS = "costs"
_MAX_LEVEL = "maxLevel"
_NEXT_LEVEL = "nextLevel"

UPGRADES_PER_TOWER = 2


@dataclass
class TowerUpgradeData:
    """One upgrade path of a tower.

    ``next_level`` counts from 1; ``values`` and ``costs`` hold one entry per
    level, so level ``n`` uses index ``n - 1``.
    """

    stat_name: str
    values: list[float] = field(default_factory=list)
    costs: list[int] = field(default_factory=list)
    max_level: int = 0
    next_level: int = 1

    def is_maxed(self) -> bool:
        """True when no further level can be bought."""
        return self.next_level > self.max_level

    def _index(self) -> int:
        if self.is_maxed():
            raise LookupError(f"upgrade {self.stat_name!r} is at its maximum level")
        return self.next_level - 1

    def next_value(self) -> float:
        """Stat value granted by the next level."""
        return self.values[self._index()]

    def next_cost(self) -> int:
        """Cost of the next level."""
        return self.costs[self._index()]


def _field(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing key {key!r}") from None


def _int(data: Any, key: str) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key!r} must be an integer")
    return value


def upgrade_data_from_dict(data: dict) -> TowerUpgradeData:
    """Build upgrade data from its JSON object."""
    stat_name = _field(data, _STAT_NAME)
    values = _field(data, _VALUES)
    costs = _field(data, _COSTS)
    if not isinstance(stat_name, str):
        raise ValueError(f"{_STAT_NAME!r} must be a string")
    if not isinstance(values, list) or not isinstance(costs, list):
        raise ValueError(f"{_VALUES!r} and {_COSTS!r} must be lists")
    try:
        return TowerUpgradeData(
            stat_name=stat_name,
            values=[float(v) for v in values],
            costs=[int(c) for c in costs],
            max_level=_int(data, _MAX_LEVEL),
            next_level=_int(data, _NEXT_LEVEL),
        )
    except (TypeError, ValueError) as error:
        raise ValueError(f"invalid upgrade data: {error}") from error


def upgrade_data_to_dict(data: TowerUpgradeData) -> dict:
    """Return the JSON object for upgrade data."""
    return {
        _STAT_NAME: data.stat_name,
        _VALUES: list(data.values),
        _COSTS: list(data.costs),
        _MAX_LEVEL: data.max_level,
        _NEXT_LEVEL: data.next_level,
    }


def upgrades_map_from_dict(
    data: dict,
) -> dict[str, tuple[TowerUpgradeData, TowerUpgradeData]]:
    """Parse a mapping of tower name to its two upgrade paths."""
    if not isinstance(data, dict):
        raise ValueError("upgrades must be an object keyed by tower name")
    upgrades = {}
    for tower_name, entries in data.items():
        if not isinstance(entries, list) or len(entries) != UPGRADES_PER_TOWER:
            raise ValueError(
                f"tower {tower_name!r} must have exactly {UPGRADES_PER_TOWER} upgrades"
            )
        first, second = (upgrade_data_from_dict(entry) for entry in entries)
        upgrades[tower_name] = (first, second)
    return upgrades


def upgrades_map_to_dict(
    upgrades: dict[str, tuple[TowerUpgradeData, TowerUpgradeData]],
) -> dict:
    """Return the JSON object for a mapping of tower upgrades."""
    return {
        tower_name: [upgrade_data_to_dict(entry) for entry in entries]
        for tower_name, entries in upgrades.items()
    }