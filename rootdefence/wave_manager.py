"""Running waves: activating them and spawning their enemies over time."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterable, Mapping

from rootdefence.entities import Enemy
from rootdefence.geometry import Vector2
from rootdefence.waves import Wave


class WaveManager:
    """Spawns the enemies of the current wave and moves on to the next wave.

    ``enemy_templates`` maps an enemy type to a callable that makes a fresh enemy.
    """

    def __init__(
        self, waves: Iterable[Wave], enemy_templates: Mapping[str, Callable[[], Enemy]]
    ) -> None:
        self.waves = list(waves)
        if not self.waves:
            raise ValueError("at least one wave is required")
        self.enemy_templates = dict(enemy_templates)
        missing = {
            cluster.enemy_type for wave in self.waves for cluster in wave.enemy_clusters
        } - self.enemy_templates.keys()
        if missing:
            raise ValueError(f"no enemy template for: {', '.join(sorted(missing))}")
        self.current_wave_id = 0
        self.spawning = False
        self._wave_spawned = False
        self._pending: deque[str] = deque()
        self._spawn_elapsed = 0.0

    @property
    def current_wave(self) -> Wave:
        return self.waves[self.current_wave_id]

    @property
    def all_waves_spawned(self) -> bool:
        """True once every enemy of the final wave has spawned."""
        return self.is_final_wave() and self._wave_spawned

    def is_final_wave(self) -> bool:
        return self.current_wave_id >= len(self.waves) - 1

    def is_play_button_active(self, enemies_on_screen: Any) -> bool:
        """True when no wave is spawning, no enemies remain, and waves are left."""
        return not self.spawning and not enemies_on_screen and not self.all_waves_spawned

    def is_victory(self, enemies_on_screen: Any) -> bool:
        """True when the final wave has spawned and every enemy is gone."""
        return self.all_waves_spawned and not enemies_on_screen

    def activate_wave(self) -> bool:
        """Start spawning the next wave; return False when none can start."""
        if self.spawning or self.all_waves_spawned:
            return False
        if self._wave_spawned:
            self.next_wave()
        self._pending = deque(
            cluster.enemy_type
            for cluster in self.current_wave.enemy_clusters
            for _ in range(cluster.count)
        )
        self.spawning = True
        # the first enemy appears on the first spawn call
        self._spawn_elapsed = self.current_wave.spawn_interval
        return True

    def spawn_wave_enemies(
        self,
        enemy_path: Iterable[Vector2],
        add_enemy: Callable[[Enemy], Any],
        dt: float,
    ) -> int:
        """Advance the spawn timer by ``dt`` seconds; return how many enemies spawned."""
        if dt < 0:
            raise ValueError("dt must not be negative")
        if not self.spawning:
            return 0
        path = list(enemy_path)
        interval = self.current_wave.spawn_interval
        self._spawn_elapsed += dt
        spawned = 0
        while self._pending and self._spawn_elapsed >= interval:
            self._spawn_elapsed -= interval
            add_enemy(self._make_enemy(self._pending.popleft(), path))
            spawned += 1
        if not self._pending:
            self.spawning = False
            self._wave_spawned = True
        return spawned

    def _make_enemy(self, enemy_type: str, path: list[Vector2]) -> Enemy:
        enemy = self.enemy_templates[enemy_type]()
        if path:
            enemy.position = path[0]
        enemy.set_path(path)
        return enemy

    def next_wave(self) -> None:
        """Move to the following wave without starting it."""
        if self.is_final_wave():
            raise LookupError("there is no wave after the final wave")
        self.current_wave_id += 1
        self.spawning = False
        self._wave_spawned = False
        self._pending.clear()