# rootdefence

`rootdefence` is the game logic of a tower defence game, with no drawing code. You can drive it from a game loop, a simulation or a test suite. It needs only the Python standard library, Python 3.10 or later.

## What it contains

| Module | Contents |
| --- | --- |
| `rootdefence.constants` | `Color` (RGBA, each channel 0–255), the colour set `Colors`, the identifier groups `GameObjectIds`, `PanelIds`, `TowerTypes`, `ParamKeys`, `UILabels` and `UITextures`, and `FPS` / `DELAY_TIME`. |
| `rootdefence.session` | `ResourceType`, `Resource`, `GameSessionData` (health, one resource of each type, current wave), and `resource_type_from_string`. |
| `rootdefence.waves` | `Wave`, `EnemyCluster`, and JSON conversion: `wave_from_dict`, `wave_to_dict`, `waves_from_json`, `waves_to_json`, `load_waves`. |
| `rootdefence.upgrades` | `TowerUpgradeData` (`is_maxed`, `next_value`, `next_cost`) and its JSON helpers, including the map from tower name to two upgrade paths. |
| `rootdefence.geometry` | `Vector2`, an immutable vector, and `Rect`, an integer rectangle with `intersects`. |
| `rootdefence.tiles` | `Tileset`, `TileLayer`, `ObjectLayer`, and `TileDraw`, which describes one tile to draw. |
| `rootdefence.level` | `Level`: tilesets, layers, enemy path and path areas. |
| `rootdefence.level_parser` | `LevelParser` for TMX maps with base64 and zlib tile data, plus `parse_polyline_points`, `parse_tile_ids` and `parse_property_value`. |
| `rootdefence.entities` | `Enemy`, `Tower`, `FreezeTower`, `Projectile`, and `tower_type_for_color`. |
| `rootdefence.managers` | `PurchaseManager`, `SellManager`, `LevelManager`, `TowerUnlockManager`, and `InsufficientResourcesError`. |
| `rootdefence.handlers` | `TowerUpgradeHandler`, `SellTowerHandler`, and `CollisionManager` for placement checks. |
| `rootdefence.wave_manager` | `WaveManager`, which activates waves and spawns their enemies on a timer. |
| `rootdefence.database` | `UserProgressDB`, a SQLite connection that also works as a context manager, plus `DatabaseError` and `sql_quote`. |
| `rootdefence.repositories` | Repositories for the `game_progress`, `maps`, `map_progress` and `tower_unlocks` tables. |
| `rootdefence.progress` | `DatabaseSeeder` and `ProgressManager`, which loads and updates saved progress. |
| `rootdefence.dtos` | Records `GameProgress`, `MapInfo`, `MapProgress` and `TowerUnlock`. |

Units and rules:

- Times (`dt`, spawn intervals) are in seconds.
- Speeds are in pixels per second.
- Defence, slow and freeze values are percentages from 0 to 100.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example: waves and enemies

```python
from rootdefence.entities import Enemy
from rootdefence.geometry import Vector2
from rootdefence.wave_manager import WaveManager
from rootdefence.waves import waves_from_json

waves = waves_from_json("""
{"waves": [
  {"spawnInterval": 1.0, "roundInterval": 5.0,
   "enemyClusters": [{"enemyType": "greenChoy", "count": 3}]}
]}
""")

manager = WaveManager(waves, {"greenChoy": lambda: Enemy(move_speed=40, max_health=10)})
enemies = []
manager.activate_wave()
manager.spawn_wave_enemies([Vector2(0, 0), Vector2(100, 0)], enemies.append, 0.0)
print(len(enemies))  # 1, because the first enemy appears right away
```

`waves_from_json` accepts any of these three shapes:

- a plain list of waves;
- an object with a `waves` list;
- an object that holds the previous shape under `waveManager`.

## Example: buying and selling

```python
from rootdefence.managers import PurchaseManager, SellManager
from rootdefence.session import GameSessionData, Resource, ResourceType

session = GameSessionData()
session.resource(ResourceType.GREEN).value = 10

shop = PurchaseManager(session, {"stump": 6})
print(shop.can_purchase_tower("stump", "green"))  # True
shop.purchase_tower(Resource(ResourceType.GREEN, 6))
print(session.resource(ResourceType.GREEN).value)  # 4
```

If a purchase costs more than the session holds, it raises `InsufficientResourcesError`.

By default, `SellManager` refunds 50% of what was spent on the selected tower.

## Example: maps

`LevelParser` takes a factory. The factory is called with each object's `type` and must return an object with a `load(params)` method.

```python
from rootdefence.level_parser import LevelParser, parse_polyline_points

points = parse_polyline_points("0,0 32,0 32,64", 16.0, 16.0)
print(points[-1])  # Vector2(x=48.0, y=80.0)

parser = LevelParser(object_factory=lambda type_name: make_object(type_name))
level = parser.parse("map1.tmx")
draws = level.render()  # list of TileDraw records
```

In this example, `make_object` stands for your own factory.

Tileset image sources are recorded with the `src/assets/Map/` prefix.

## Example: saved progress

```python
from rootdefence.database import UserProgressDB
from rootdefence.progress import ProgressManager
from rootdefence.repositories import (
    GameProgressRepository,
    MapsProgressRepository,
    MapsRepository,
    TowerUnlocksRepository,
)

manager = ProgressManager(
    GameProgressRepository(),
    MapsRepository(),
    MapsProgressRepository(),
    TowerUnlocksRepository(),
    UserProgressDB(),
)
manager.load_all("progress.db")
manager.update_max_wave(1, 12)  # kept only if it beats the stored best
manager.close()
```

`load_all` does four things:

1. opens the database;
2. creates any missing tables;
3. seeds empty tables with a game progress row, three maps and their map progress;
4. loads everything.

`delete_progress` resets coins, experience, level, best waves and tower unlocks to their defaults. It does not delete the rows.

## What the package does not do

- **No window, rendering, sound or input handling.** `TileLayer.render` and `Level.render` return `TileDraw` records instead of drawing. `ObjectLayer.render` calls `draw()` on its objects.
- **No game loop or screens.** There are no menu, pause, game-over or victory screens or panels, and no command-line program to start a game.
- **No loading of enemy, tower or projectile stats from data files.** Build `Enemy`, `Tower` and `Projectile` objects yourself, or give `WaveManager` factories that do.
- **No tower unlock data.** The seeder leaves the `tower_unlocks` table empty, so fill it yourself if you use `TowerUnlockManager`.
- **No level thresholds.** `LevelManager` takes them from the caller.