"""Tower upgrade and sale handling, and placement collision checks."""

from __future__ import annotations

from typing import Any

from rootdefence.constants import ParamKeys
from rootdefence.entities import Tower
from rootdefence.geometry import Rect
from rootdefence.level import Level
from rootdefence.managers import PurchaseManager, SellManager
from rootdefence.session import Resource, resource_type_from_string

_STAT_ATTRIBUTES = {
    ParamKeys.DAMAGE: "damage",
    ParamKeys.ATTACK_SPEED: "attack_speed",
    ParamKeys.RADIUS: "radius",
    ParamKeys.FREEZE_PERCENTAGE: "freeze_percentage",
}


class TowerUpgradeHandler:
    """Buys the next level of a tower's upgrade and applies it."""

    def __init__(self, purchase_manager: PurchaseManager, sell_manager: SellManager) -> None:
        self.purchase_manager = purchase_manager
        self.sell_manager = sell_manager

    def handle_upgrade(self, tower: Tower, upgrade_id: int) -> bool:
        """Upgrade the tower if affordable; return True when the upgrade was applied."""
        if not 0 <= upgrade_id < len(tower.upgrades):
            raise ValueError(f"tower {tower.name!r} has no upgrade {upgrade_id}")
        upgrade = tower.upgrades[upgrade_id]
        attribute = _STAT_ATTRIBUTES.get(upgrade.stat_name)
        if attribute is None or not hasattr(tower, attribute):
            raise ValueError(f"tower {tower.name!r} cannot upgrade {upgrade.stat_name!r}")
        if not self.purchase_manager.can_purchase_upgrade(upgrade, tower.color):
            return False

        cost = upgrade.next_cost()
        setattr(tower, attribute, upgrade.next_value())
        self.purchase_manager.purchase_upgrade(cost, tower.color)
        self.sell_manager.selected_tower = tower
        self.sell_manager.update_spent_resources(
            Resource(resource_type_from_string(tower.color.upper()), cost)
        )
        upgrade.next_level += 1
        return True


class SellTowerHandler:
    """Sells a tower and removes it from the play state's towers."""

    def __init__(self, towers: list[Tower], sell_manager: SellManager) -> None:
        self.towers = towers
        self.sell_manager = sell_manager

    def handle_sell(self, tower: Tower) -> Resource:
        """Refund the tower and remove it; return the refund."""
        for index, placed in enumerate(self.towers):
            if placed is tower:
                break
        else:
            raise ValueError(f"tower {tower.name!r} is not placed")
        self.sell_manager.selected_tower = tower
        refund = self.sell_manager.sell_selected_tower()
        del self.towers[index]
        return refund


def _bounds(item: Any) -> Rect:
    if isinstance(item, Rect):
        return item
    return Rect(int(item.position.x), int(item.position.y), item.width, item.height)


class CollisionManager:
    """Collision tests between placed towers, the enemy path and new placements."""

    def __init__(self, towers: list[Tower]) -> None:
        self.towers = towers

    def collide_tower_placement(self, rect: Any, level: Level) -> bool:
        """True when ``rect`` overlaps a placed tower or the level's path area."""
        bounds = _bounds(rect)
        if any(
            self.check_collision(bounds, tower) for tower in self.towers if tower is not rect
        ):
            return True
        return any(bounds.intersects(area) for area in level.path_areas)

    def check_collision(self, first: Any, second: Any) -> bool:
        """True when two rectangles or objects with position and size overlap."""
        return _bounds(first).intersects(_bounds(second))