import pytest

from rootdefence.entities import Enemy
from rootdefence.geometry import Vector2
from rootdefence.wave_manager import WaveManager
from rootdefence.waves import EnemyCluster, Wave

PATH = [Vector2(0, 0), Vector2(100, 0)]


def templates():
    return {
        "choy": lambda: Enemy(move_speed=10, max_health=5),
        "bean": lambda: Enemy(move_speed=20, max_health=8),
    }


def make_manager():
    waves = [
        Wave(1.0, 5.0, [EnemyCluster("choy", 2), EnemyCluster("bean", 1)]),
        Wave(0.5, 5.0, [EnemyCluster("choy", 1)]),
    ]
    return WaveManager(waves, templates())


def test_nothing_spawns_before_activation():
    manager = make_manager()
    spawned = []
    assert manager.spawn_wave_enemies(PATH, spawned.append, 10.0) == 0
    assert spawned == []
    assert manager.is_play_button_active(0) is True


def test_spawns_clusters_in_order_at_interval():
    manager = make_manager()
    spawned = []
    assert manager.activate_wave() is True
    assert manager.activate_wave() is False
    assert manager.spawn_wave_enemies(PATH, spawned.append, 0.0) == 1
    assert manager.spawn_wave_enemies(PATH, spawned.append, 0.5) == 0
    assert manager.spawn_wave_enemies(PATH, spawned.append, 0.5) == 1
    assert manager.is_play_button_active(0) is False
    assert manager.spawn_wave_enemies(PATH, spawned.append, 1.0) == 1
    assert [enemy.move_speed for enemy in spawned] == [10, 10, 20]
    assert manager.spawning is False
    assert manager.is_play_button_active(0) is True
    assert manager.is_play_button_active(spawned) is False


def test_spawned_enemy_starts_on_path():
    manager = make_manager()
    spawned = []
    manager.activate_wave()
    manager.spawn_wave_enemies(PATH, spawned.append, 0.0)
    assert spawned[0].position == PATH[0]
    assert spawned[0].path == PATH


def test_final_wave_and_victory():
    manager = make_manager()
    spawned = []
    manager.activate_wave()
    manager.spawn_wave_enemies(PATH, spawned.append, 10.0)
    assert manager.is_final_wave() is False
    assert manager.activate_wave() is True
    assert manager.current_wave_id == 1
    assert manager.is_final_wave() is True
    assert manager.spawn_wave_enemies(PATH, spawned.append, 0.0) == 1
    assert manager.all_waves_spawned is True
    assert manager.is_play_button_active(0) is False
    assert manager.activate_wave() is False
    assert manager.is_victory([]) is True
    assert manager.is_victory(spawned) is False
    with pytest.raises(LookupError):
        manager.next_wave()


def test_zero_interval_spawns_whole_wave():
    manager = WaveManager([Wave(0.0, 0.0, [EnemyCluster("bean", 3)])], templates())
    spawned = []
    manager.activate_wave()
    assert manager.spawn_wave_enemies(PATH, spawned.append, 0.0) == 3
    assert len(spawned) == 3
    assert len({id(enemy) for enemy in spawned}) == 3


def test_next_wave_resets_spawning():
    manager = make_manager()
    manager.activate_wave()
    manager.next_wave()
    assert manager.current_wave_id == 1
    assert manager.spawning is False


def test_validation():
    with pytest.raises(ValueError):
        WaveManager([], templates())
    with pytest.raises(ValueError):
        WaveManager([Wave(1.0, 1.0, [EnemyCluster("pepper", 1)])], templates())
    manager = make_manager()
    with pytest.raises(ValueError):
        manager.spawn_wave_enemies(PATH, lambda enemy: None, -1.0)