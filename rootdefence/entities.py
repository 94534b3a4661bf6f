"""Enemies, towers and the projectiles towers fire."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from rootdefence.constants import TowerTypes
from rootdefence.geometry import Vector2
from rootdefence.session import Resource, ResourceType
from rootdefence.upgrades import TowerUpgradeData

DEFAULT_MAX_SLOW_PERCENTAGE = 50.0

_TOWER_TYPES = {
    "green": TowerTypes.GREEN,
    "yellow": TowerTypes.YELLOW,
    "red": TowerTypes.RED,
    "blue": TowerTypes.BLUE,
}


def tower_type_for_color(tower_color: str) -> str:
    """Return the tower type name (e.g. ``"agate"``) for a tower colour."""
    try:
        return _TOWER_TYPES[tower_color.lower()]
    except KeyError:
        raise ValueError(f"unknown tower colour: {tower_color!r}") from None


def _default_resource() -> Resource:
    return Resource(ResourceType.GREEN, 0)


def _check_percentage(name: str, value: float) -> None:
    if not 0 <= value <= 100:
        raise ValueError(f"{name} must be between 0 and 100, got {value}")


@dataclass(eq=False)
class Enemy:
    """An enemy walking along the level's path.

    ``defence`` and slow percentages are in percent (0-100); ``move_speed``
    is in pixels per second.
    """

    move_speed: float = 0.0
    max_health: float = 1.0
    defence: float = 0.0
    drop: Resource = field(default_factory=_default_resource)
    exp: int = 0
    position: Vector2 = field(default_factory=Vector2)
    width: int = 0
    height: int = 0
    texture_id: str = ""
    max_slow_percentage: float = DEFAULT_MAX_SLOW_PERCENTAGE
    health: float = field(init=False, default=0.0)
    distance: float = field(init=False, default=0.0)
    speed_multiplier: float = field(init=False, default=1.0)
    crossed_end_of_path: bool = field(init=False, default=False)
    _path: list[Vector2] = field(init=False, default_factory=list, repr=False)
    _waypoint: int = field(init=False, default=0, repr=False)
    _slow_additive: float = field(init=False, default=0.0, repr=False)

    def __post_init__(self) -> None:
        if self.max_health <= 0:
            raise ValueError("max_health must be positive")
        if self.move_speed < 0:
            raise ValueError("move_speed must not be negative")
        _check_percentage("defence", self.defence)
        _check_percentage("max_slow_percentage", self.max_slow_percentage)
        self.health = self.max_health

    @property
    def center(self) -> Vector2:
        return self.position + Vector2(self.width / 2, self.height / 2)

    @property
    def slow_percentage(self) -> float:
        """Slow applied during the current frame."""
        return self._slow_additive

    @property
    def path(self) -> list[Vector2]:
        return list(self._path)

    def set_path(self, path: Iterable[Vector2]) -> None:
        """Set the points to walk through and restart progress along them."""
        self._path = list(path)
        self._waypoint = 0
        self.distance = 0.0
        self.crossed_end_of_path = False

    def slow(self, slow_percentage: float) -> None:
        """Add a slow for this frame, capped at ``max_slow_percentage``."""
        if slow_percentage < 0:
            raise ValueError("slow percentage must not be negative")
        self._slow_additive = min(
            self._slow_additive + slow_percentage, self.max_slow_percentage
        )

    def deal_damage(self, damage: float) -> float:
        """Reduce health by ``damage`` after defence; return the health removed."""
        if damage < 0:
            raise ValueError("damage must not be negative")
        reduced = damage * (1 - self.defence / 100)
        dealt = min(reduced, max(self.health, 0.0))
        self.health -= dealt
        return dealt

    def is_alive(self) -> bool:
        return self.health > 0

    def actual_move_speed(self) -> float:
        """Movement speed with multiplier and this frame's slow applied."""
        return self.move_speed * self.speed_multiplier * (1 - self._slow_additive / 100)

    def update(self, dt: float) -> None:
        """Walk along the path for ``dt`` seconds; slows last one frame."""
        if dt < 0:
            raise ValueError("dt must not be negative")
        if self.is_alive() and not self.crossed_end_of_path:
            self._move(self.actual_move_speed() * dt)
        self._slow_additive = 0.0

    def _move(self, remaining: float) -> None:
        while remaining > 0 and self._waypoint < len(self._path):
            target = self._path[self._waypoint]
            to_target = target - self.position
            gap = to_target.length()
            if gap <= remaining:
                self.position = target
                self.distance += gap
                remaining -= gap
                self._waypoint += 1
            else:
                self.position = self.position + to_target.normalized() * remaining
                self.distance += remaining
                remaining = 0
        if self._path and self._waypoint >= len(self._path):
            self.crossed_end_of_path = True


@dataclass(eq=False)
class Tower:
    """A placed tower that targets enemies in its radius."""

    name: str = ""
    projectile_id: str = ""
    damage: float = 0.0
    radius: float = 0.0
    attack_speed: float = 0.0
    base_cost: Resource = field(default_factory=_default_resource)
    color: str = ""
    upgrades: tuple[TowerUpgradeData, ...] = ()
    position: Vector2 = field(default_factory=Vector2)
    width: int = 0
    height: int = 0
    texture_id: str = ""
    damage_dealt: float = field(init=False, default=0.0)
    spent_resources: Resource = field(init=False)
    target: Enemy | None = field(init=False, default=None)
    _attack_elapsed: float = field(init=False, default=0.0, repr=False)

    def __post_init__(self) -> None:
        self.spent_resources = Resource(self.base_cost.type, 0)

    @property
    def center(self) -> Vector2:
        return self.position + Vector2(self.width / 2, self.height / 2)

    @property
    def tower_type(self) -> str:
        return tower_type_for_color(self.color)

    def in_radius(self, enemy: Enemy) -> bool:
        """True when the enemy's centre lies within the tower's radius."""
        return self.center.distance_to(enemy.center) <= self.radius

    def _can_target(self, enemy: Enemy) -> bool:
        return enemy.is_alive() and not enemy.crossed_end_of_path and self.in_radius(enemy)

    def target_enemy(self, enemies: Iterable[Enemy]) -> Enemy | None:
        """Keep the current target while valid, else pick the enemy furthest along."""
        candidates = [enemy for enemy in enemies if self._can_target(enemy)]
        current = self.target
        if current is not None and any(enemy is current for enemy in candidates):
            return current
        self.target = max(candidates, key=lambda enemy: enemy.distance, default=None)
        return self.target

    def increment_dealt_damage(self, damage: float) -> None:
        self.damage_dealt += damage

    def ready_to_fire(self, dt: float) -> bool:
        """Advance the attack timer by ``dt`` seconds; True when an attack is due."""
        if dt < 0:
            raise ValueError("dt must not be negative")
        if self.attack_speed <= 0:
            return False
        self._attack_elapsed += dt
        interval = 1 / self.attack_speed
        if self._attack_elapsed >= interval:
            self._attack_elapsed -= interval
            return True
        return False


@dataclass(eq=False)
class FreezeTower(Tower):
    """A tower that slows every enemy in its radius instead of shooting."""

    freeze_percentage: float = 0.0

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_percentage("freeze_percentage", self.freeze_percentage)

    def target_enemy(self, enemies: Iterable[Enemy]) -> list[Enemy]:
        """Slow every living enemy in radius; return the enemies affected."""
        affected = [enemy for enemy in enemies if self._can_target(enemy)]
        for enemy in affected:
            enemy.slow(self.freeze_percentage)
        self.target = None
        return affected


@dataclass(eq=False)
class Projectile:
    """A projectile flying towards its target enemy."""

    damage: float = 0.0
    speed: float = 0.0
    tower_type: ResourceType = ResourceType.GREEN
    target: Enemy | None = None
    tower_origin: Tower | None = None
    position: Vector2 = field(default_factory=Vector2)
    width: int = 0
    height: int = 0
    texture_id: str = ""
    hit_enemy: bool = field(init=False, default=False)

    @property
    def center(self) -> Vector2:
        return self.position + Vector2(self.width / 2, self.height / 2)

    @property
    def finished(self) -> bool:
        """True once the projectile has hit or its target is gone."""
        return self.hit_enemy or self.target is None or not self.target.is_alive()

    def update(self, dt: float) -> bool:
        """Fly towards the target for ``dt`` seconds; True on the frame it hits."""
        if dt < 0:
            raise ValueError("dt must not be negative")
        if self.finished:
            return False
        target = self.target
        delta = target.center - self.center
        step = self.speed * dt
        if delta.length() > step:
            self.position = self.position + delta.normalized() * step
            return False
        self.position = self.position + delta
        dealt = target.deal_damage(self.damage)
        if self.tower_origin is not None:
            self.tower_origin.increment_dealt_damage(dealt)
        self.hit_enemy = True
        return True