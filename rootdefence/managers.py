"""Purchases, sales, player levels and tower unlocks during play."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from rootdefence.dtos import GameProgress, TowerUnlock
from rootdefence.entities import Tower
from rootdefence.session import GameSessionData, Resource, ResourceType, resource_type_from_string
from rootdefence.upgrades import TowerUpgradeData

DEFAULT_SELL_PERCENTAGE = 50.0
DEFAULT_MAX_LEVEL = 20


class InsufficientResourcesError(ValueError):
    """Raised when a purchase costs more than the session holds."""


def _resource_type(tower_color: str) -> ResourceType:
    return resource_type_from_string(tower_color.upper())


class PurchaseManager:
    """Checks and pays for towers and tower upgrades from the session's resources."""

    def __init__(self, session: GameSessionData, tower_costs: Mapping[str, int]) -> None:
        self.session = session
        self.tower_costs = dict(tower_costs)

    def tower_cost(self, tower_name: str) -> int:
        try:
            return self.tower_costs[tower_name]
        except KeyError:
            raise LookupError(f"no cost known for tower {tower_name!r}") from None

    def can_purchase_tower(self, tower_name: str, tower_color: str) -> bool:
        """True when the resource of ``tower_color`` covers the tower's cost."""
        held = self.session.resource(_resource_type(tower_color))
        return held.value >= self.tower_cost(tower_name)

    def purchase_tower(self, cost: Resource) -> None:
        """Deduct a tower's cost from the session."""
        self._pay(cost.type, cost.value)

    def can_purchase_upgrade(self, upgrade: TowerUpgradeData, tower_color: str) -> bool:
        """True when the upgrade has a next level and its cost can be paid."""
        if upgrade.is_maxed():
            return False
        held = self.session.resource(_resource_type(tower_color))
        return held.value >= upgrade.next_cost()

    def purchase_upgrade(self, cost: int, tower_color: str) -> None:
        """Deduct an upgrade's cost from the resource of ``tower_color``."""
        self._pay(_resource_type(tower_color), cost)

    def _pay(self, resource_type: ResourceType, amount: int) -> None:
        if amount < 0:
            raise ValueError("cost must not be negative")
        held = self.session.resource(resource_type)
        if held.value < amount:
            raise InsufficientResourcesError(
                f"need {amount} {resource_type.label}, have {held.value}"
            )
        held.value -= amount


class SellManager:
    """Tracks what was spent on the selected tower and refunds part of it on sale."""

    def __init__(
        self, session: GameSessionData, base_sell_percentage: float = DEFAULT_SELL_PERCENTAGE
    ) -> None:
        if not 0 <= base_sell_percentage <= 100:
            raise ValueError("base_sell_percentage must be between 0 and 100")
        self.session = session
        self.base_sell_percentage = base_sell_percentage
        self.selected_tower: Tower | None = None

    def _tower(self) -> Tower:
        if self.selected_tower is None:
            raise LookupError("no tower is selected")
        return self.selected_tower

    def update_spent_resources(self, resource: Resource) -> None:
        """Add a purchase made for the selected tower to its spent resources."""
        if resource.value < 0:
            raise ValueError("spent value must not be negative")
        tower = self._tower()
        spent = tower.spent_resources
        if spent.type is not resource.type:
            if spent.value:
                raise ValueError(
                    f"tower was paid in {spent.type.label}, not {resource.type.label}"
                )
            spent.type = resource.type
        spent.value += resource.value

    def sell_value(self) -> Resource:
        """The refund the selected tower would give."""
        spent = self._tower().spent_resources
        return Resource(spent.type, int(spent.value * self.base_sell_percentage / 100))

    def sell_selected_tower(self) -> Resource:
        """Return part of the selected tower's spent resources to the session."""
        refund = self.sell_value()
        self.session.resource(refund.type).value += refund.value
        self.selected_tower = None
        return refund


class LevelManager:
    """Adds experience to the player and raises their level.

    ``level_thresholds[n - 1]`` is the experience needed to go from level ``n``
    to level ``n + 1``.
    """

    def __init__(
        self,
        progress_manager: Any,
        level_thresholds: Iterable[int],
        max_level: int = DEFAULT_MAX_LEVEL,
    ) -> None:
        thresholds = list(level_thresholds)
        if max_level < 1:
            raise ValueError("max_level must be at least 1")
        if len(thresholds) < max_level - 1:
            raise ValueError(f"need {max_level - 1} level thresholds, got {len(thresholds)}")
        if any(threshold <= 0 for threshold in thresholds):
            raise ValueError("level thresholds must be positive")
        self.progress_manager = progress_manager
        self.level_thresholds = thresholds
        self.max_level = max_level
        self.on_level_up: Callable[[int], Any] | None = None

    def _progress(self) -> GameProgress:
        progress = self.progress_manager.game_progress
        if progress is None:
            raise LookupError("game progress is not loaded")
        return progress

    @property
    def next_level_xp(self) -> int | None:
        """Experience needed to leave the current level, or None at the top level."""
        level = self._progress().level
        if level >= self.max_level:
            return None
        return self.level_thresholds[level - 1]

    def add_experience(self, exp: int) -> int:
        """Add experience, level up as often as it allows, and return the levels gained."""
        if exp < 0:
            raise ValueError("experience must not be negative")
        progress = self._progress()
        if progress.level >= self.max_level:
            return 0
        xp = progress.level_xp + exp
        level = progress.level
        gained = 0
        while level < self.max_level and xp >= self.level_thresholds[level - 1]:
            xp -= self.level_thresholds[level - 1]
            level += 1
            gained += 1
        self.progress_manager.update_loaded_level(progress.id, xp, level)
        if gained:
            self.progress_manager.update_level_to_db(progress.id)
            if self.on_level_up is not None:
                self.on_level_up(level)
        return gained


class TowerUnlockManager:
    """Unlocks towers once the player reaches their required level."""

    def __init__(self, progress_manager: Any) -> None:
        self.progress_manager = progress_manager

    def unlock_towers_for_level(self, level: int) -> list[TowerUnlock]:
        """Unlock every locked tower whose required level is reached; return them."""
        newly_unlocked = [
            unlock
            for unlock in self.progress_manager.tower_unlocks
            if not unlock.unlocked and unlock.require_level <= level
        ]
        for unlock in newly_unlocked:
            self.progress_manager.unlock_tower(unlock.id)
        return newly_unlocked