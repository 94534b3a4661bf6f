import pytest

from rootdefence.entities import (
    Enemy,
    FreezeTower,
    Projectile,
    Tower,
    tower_type_for_color,
)
from rootdefence.geometry import Vector2
from rootdefence.session import Resource, ResourceType


def make_enemy(**kwargs):
    params = dict(move_speed=10.0, max_health=100.0)
    params.update(kwargs)
    return Enemy(**params)


@pytest.mark.parametrize(
    "color, expected",
    [("green", "agate"), ("YELLOW", "amber"), ("red", "ruby"), ("Blue", "sapphire")],
)
def test_tower_type_for_color(color, expected):
    assert tower_type_for_color(color) == expected


def test_tower_type_for_unknown_color():
    with pytest.raises(ValueError):
        tower_type_for_color("purple")


def test_enemy_starts_at_full_health():
    enemy = make_enemy(max_health=42.0)
    assert enemy.health == 42.0
    assert enemy.is_alive()


def test_enemy_rejects_bad_defence():
    with pytest.raises(ValueError):
        make_enemy(defence=150.0)


def test_deal_damage_reduces_health_by_returned_amount():
    enemy = make_enemy(defence=25.0)
    before = enemy.health
    dealt = enemy.deal_damage(20.0)
    assert 0 < dealt < 20.0
    assert enemy.health == pytest.approx(before - dealt)


def test_deal_damage_without_defence_is_full():
    enemy = make_enemy()
    assert enemy.deal_damage(30.0) == 30.0


def test_deal_damage_never_below_zero():
    enemy = make_enemy(max_health=10.0)
    dealt = enemy.deal_damage(1000.0)
    assert dealt == 10.0
    assert enemy.health == 0
    assert not enemy.is_alive()


def test_deal_negative_damage_rejected():
    with pytest.raises(ValueError):
        make_enemy().deal_damage(-1.0)


def test_slow_reduces_speed_and_is_capped():
    enemy = make_enemy(max_slow_percentage=40.0)
    full = enemy.actual_move_speed()
    enemy.slow(10.0)
    slowed = enemy.actual_move_speed()
    assert slowed < full
    enemy.slow(1000.0)
    assert enemy.slow_percentage == 40.0


def test_slow_lasts_one_frame():
    enemy = make_enemy()
    enemy.slow(20.0)
    enemy.update(0.0)
    assert enemy.slow_percentage == 0
    assert enemy.actual_move_speed() == enemy.move_speed


def test_slow_negative_rejected():
    with pytest.raises(ValueError):
        make_enemy().slow(-5.0)


def test_enemy_moves_speed_times_dt():
    enemy = make_enemy(move_speed=10.0)
    enemy.set_path([Vector2(100, 0)])
    enemy.update(1.0)
    assert enemy.position.x == pytest.approx(10.0)
    assert enemy.position.y == pytest.approx(0.0)
    assert enemy.distance == pytest.approx(10.0)
    assert not enemy.crossed_end_of_path


def test_enemy_reaches_end_of_path():
    path = [Vector2(30, 0), Vector2(30, 40), Vector2(0, 40)]
    enemy = make_enemy(move_speed=50.0)
    enemy.set_path(path)
    for _ in range(20):
        enemy.update(1.0)
    assert enemy.position == path[-1]
    assert enemy.crossed_end_of_path
    total = sum(a.distance_to(b) for a, b in zip([Vector2(0, 0)] + path, path))
    assert enemy.distance == pytest.approx(total)


def test_slowed_enemy_moves_less():
    fast = make_enemy()
    slow = make_enemy()
    for enemy in (fast, slow):
        enemy.set_path([Vector2(1000, 0)])
    slow.slow(30.0)
    fast.update(1.0)
    slow.update(1.0)
    assert slow.distance < fast.distance


def test_dead_enemy_does_not_move():
    enemy = make_enemy()
    enemy.set_path([Vector2(100, 0)])
    enemy.deal_damage(1000.0)
    enemy.update(1.0)
    assert enemy.position == Vector2(0, 0)


def test_enemy_update_rejects_negative_dt():
    with pytest.raises(ValueError):
        make_enemy().update(-0.1)


def test_tower_in_radius():
    tower = Tower(radius=50.0)
    near = make_enemy(position=Vector2(30, 40))
    far = make_enemy(position=Vector2(100, 0))
    assert tower.in_radius(near)
    assert not tower.in_radius(far)


def test_tower_targets_enemy_furthest_along():
    tower = Tower(radius=1000.0)
    behind = make_enemy()
    ahead = make_enemy()
    behind.set_path([Vector2(500, 0)])
    ahead.set_path([Vector2(500, 0)])
    behind.update(1.0)
    ahead.update(3.0)
    assert tower.target_enemy([behind, ahead]) is ahead
    assert tower.target is ahead


def test_tower_keeps_current_target_while_valid():
    tower = Tower(radius=1000.0)
    first = make_enemy()
    second = make_enemy()
    first.set_path([Vector2(500, 0)])
    second.set_path([Vector2(500, 0)])
    tower.target_enemy([first])
    second.update(5.0)
    assert tower.target_enemy([first, second]) is first


def test_tower_drops_dead_target():
    tower = Tower(radius=1000.0)
    first = make_enemy()
    second = make_enemy()
    tower.target_enemy([first])
    first.deal_damage(1000.0)
    assert tower.target_enemy([first, second]) is second


def test_tower_without_enemies_in_range_has_no_target():
    tower = Tower(radius=5.0)
    assert tower.target_enemy([make_enemy(position=Vector2(100, 100))]) is None


def test_increment_dealt_damage_accumulates():
    tower = Tower()
    tower.increment_dealt_damage(5.0)
    tower.increment_dealt_damage(7.5)
    assert tower.damage_dealt == pytest.approx(12.5)


def test_ready_to_fire_follows_attack_speed():
    tower = Tower(attack_speed=2.0)
    assert tower.ready_to_fire(0.25) is False
    assert tower.ready_to_fire(0.25) is True
    assert tower.ready_to_fire(0.25) is False


def test_zero_attack_speed_never_fires():
    tower = Tower(attack_speed=0.0)
    assert not any(tower.ready_to_fire(10.0) for _ in range(5))


def test_spent_resources_start_empty_of_cost_type():
    tower = Tower(base_cost=Resource(ResourceType.RED, 40))
    assert tower.spent_resources == Resource(ResourceType.RED, 0)


def test_freeze_tower_slows_enemies_in_radius():
    tower = FreezeTower(radius=50.0, freeze_percentage=20.0)
    near = make_enemy(position=Vector2(10, 0))
    far = make_enemy(position=Vector2(500, 0))
    affected = tower.target_enemy([near, far])
    assert affected == [near]
    assert near.slow_percentage == 20.0
    assert far.slow_percentage == 0
    assert tower.target is None


def test_freeze_tower_rejects_bad_percentage():
    with pytest.raises(ValueError):
        FreezeTower(freeze_percentage=-1.0)


def test_projectile_approaches_target():
    enemy = make_enemy(position=Vector2(100, 0))
    projectile = Projectile(damage=5.0, speed=10.0, target=enemy)
    assert projectile.update(1.0) is False
    assert projectile.position.x == pytest.approx(10.0)
    assert enemy.health == enemy.max_health


def test_projectile_hits_and_credits_tower():
    tower = Tower()
    enemy = make_enemy(position=Vector2(5, 0))
    projectile = Projectile(damage=15.0, speed=100.0, target=enemy, tower_origin=tower)
    assert projectile.update(1.0) is True
    assert projectile.hit_enemy
    assert projectile.finished
    assert enemy.health == pytest.approx(enemy.max_health - 15.0)
    assert tower.damage_dealt == pytest.approx(15.0)
    assert projectile.update(1.0) is False


def test_projectile_with_dead_target_is_finished():
    enemy = make_enemy()
    enemy.deal_damage(1000.0)
    projectile = Projectile(damage=1.0, speed=10.0, target=enemy)
    assert projectile.finished
    assert projectile.update(1.0) is False
    assert not projectile.hit_enemy


def test_projectile_rejects_negative_dt():
    with pytest.raises(ValueError):
        Projectile(target=make_enemy()).update(-1.0)