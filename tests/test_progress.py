import pytest

from rootdefence.database import DatabaseError, UserProgressDB
from rootdefence.dtos import MapInfo, MapProgress
from rootdefence.progress import (
    DEFAULT_MAPS,
    DatabaseSeeder,
    ProgressManager,
    default_game_progress,
)
from rootdefence.repositories import (
    DEFAULT_MAX_WAVE,
    GameProgressRepository,
    MapsProgressRepository,
    MapsRepository,
    TowerUnlocksRepository,
)


def make_manager():
    return ProgressManager(
        GameProgressRepository(),
        MapsRepository(),
        MapsProgressRepository(),
        TowerUnlocksRepository(),
        UserProgressDB(),
    )


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "progress.db"


@pytest.fixture
def manager(db_path):
    progress_manager = make_manager()
    progress_manager.load_all(db_path)
    yield progress_manager
    progress_manager.close()


def test_load_all_seeds_defaults(manager):
    assert manager.game_progress == default_game_progress()
    assert manager.maps == list(DEFAULT_MAPS)
    assert manager.maps_progress == [
        MapProgress(map_id=m.id, max_wave=DEFAULT_MAX_WAVE) for m in DEFAULT_MAPS
    ]


def test_seed_leaves_filled_tables(tmp_path):
    db = UserProgressDB()
    db.open(":memory:")
    db.create_tables()
    maps_repo = MapsRepository()
    maps_repo.upsert(db, MapInfo(id=5, name="Custom"))
    seeder = DatabaseSeeder(GameProgressRepository(), maps_repo, MapsProgressRepository())
    seeder.seed(db)
    seeder.seed(db)
    assert maps_repo.load(db) == [MapInfo(id=5, name="Custom")]
    assert MapsProgressRepository().load(db) == [MapProgress(map_id=5, max_wave=DEFAULT_MAX_WAVE)]
    db.close()


def test_update_coins_persists(manager, db_path):
    progress_id = manager.game_progress.id
    manager.update_coins(progress_id, 250)
    assert manager.game_progress.coins == 250
    manager.close()
    reopened = make_manager()
    reopened.load_all(db_path)
    assert reopened.game_progress.coins == 250
    reopened.close()


def test_loaded_level_written_only_on_request(manager):
    progress_id = manager.game_progress.id
    manager.update_loaded_level(progress_id, 12, 4)
    assert GameProgressRepository().load(manager._db).level == default_game_progress().level
    manager.update_level_to_db(progress_id)
    stored = GameProgressRepository().load(manager._db)
    assert (stored.level_xp, stored.level) == (12, 4)


def test_update_loaded_level_unknown_id_raises(manager):
    with pytest.raises(LookupError):
        manager.update_loaded_level(manager.game_progress.id + 100, 1, 1)


def test_update_max_wave_keeps_best(manager):
    map_id = DEFAULT_MAPS[0].id
    manager.update_max_wave(map_id, 6)
    manager.update_max_wave(map_id, 3)
    loaded = {p.map_id: p.max_wave for p in manager.maps_progress}
    stored = {p.map_id: p.max_wave for p in MapsProgressRepository().load(manager._db)}
    assert loaded[map_id] == 6
    assert stored == loaded


def test_delete_progress_restores_defaults(manager):
    progress_id = manager.game_progress.id
    manager.update_coins(progress_id, 77)
    manager.update_max_wave(DEFAULT_MAPS[0].id, 9)
    manager.delete_progress()
    assert manager.game_progress == default_game_progress()
    assert all(p.max_wave == DEFAULT_MAX_WAVE for p in manager.maps_progress)


def test_unlock_tower(manager):
    manager._db.execute(
        "INSERT INTO tower_unlocks (id, name, require_level, unlocked) VALUES (?, ?, ?, ?)",
        (1, "pine", 3, 0),
    )
    manager.delete_progress()
    assert [u.unlocked for u in manager.tower_unlocks] == [False]
    manager.unlock_tower(1)
    assert [u.unlocked for u in manager.tower_unlocks] == [True]
    assert [u.unlocked for u in TowerUnlocksRepository().load_all(manager._db)] == [True]


def test_upsert_and_get_map(manager):
    new_map = MapInfo(id=len(DEFAULT_MAPS) + 1, name="Marsh")
    manager.upsert_map(new_map)
    assert manager.get_map(new_map.id) == new_map
    assert manager.maps[-1] == new_map


def test_get_missing_map_raises(manager):
    with pytest.raises(LookupError):
        manager.get_map(len(DEFAULT_MAPS) + 50)


def test_operations_after_close_raise(manager):
    manager.close()
    with pytest.raises(DatabaseError):
        manager.update_coins(manager.game_progress.id, 1)


def test_load_all_bad_path_raises(tmp_path):
    with pytest.raises(DatabaseError):
        make_manager().load_all(tmp_path / "missing" / "dir" / "progress.db")