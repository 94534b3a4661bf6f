"""Table access for game progress, maps, map progress and tower unlocks."""

from __future__ import annotations

from rootdefence.database import UserProgressDB
from rootdefence.dtos import GameProgress, MapInfo, MapProgress, TowerUnlock

DEFAULT_COINS = 0
DEFAULT_LEVEL_XP = 0
DEFAULT_LEVEL = 1
DEFAULT_MAX_WAVE = 0


class GameProgressRepository:
    """Access to the ``game_progress`` table."""

    def load(self, db: UserProgressDB) -> GameProgress | None:
        """Return the stored game progress, or None when the table is empty."""
        rows = db.execute(
            "SELECT id, coins, level_xp, level FROM game_progress ORDER BY id LIMIT 1"
        )
        if not rows:
            return None
        progress_id, coins, level_xp, level = rows[0]
        return GameProgress(id=progress_id, coins=coins, level_xp=level_xp, level=level)

    def exists(self, db: UserProgressDB) -> bool:
        return bool(db.execute("SELECT 1 FROM game_progress LIMIT 1"))

    def upsert(self, db: UserProgressDB, progress: GameProgress) -> None:
        db.execute(
            "INSERT INTO game_progress (id, coins, level_xp, level) VALUES (?, ?, ?, ?) "
            "ON CONFLICT(id) DO UPDATE SET coins = excluded.coins, "
            "level_xp = excluded.level_xp, level = excluded.level",
            (progress.id, progress.coins, progress.level_xp, progress.level),
        )

    def update_coins(self, db: UserProgressDB, progress_id: int, coins: int) -> None:
        db.execute("UPDATE game_progress SET coins = ? WHERE id = ?", (coins, progress_id))

    def update_level(
        self, db: UserProgressDB, progress_id: int, level_xp: int, level: int
    ) -> None:
        db.execute(
            "UPDATE game_progress SET level_xp = ?, level = ? WHERE id = ?",
            (level_xp, level, progress_id),
        )

    def delete_progress(self, db: UserProgressDB, progress_id: int) -> None:
        """Reset the row to its default values instead of deleting it."""
        db.execute(
            "UPDATE game_progress SET coins = ?, level_xp = ?, level = ? WHERE id = ?",
            (DEFAULT_COINS, DEFAULT_LEVEL_XP, DEFAULT_LEVEL, progress_id),
        )


class MapsRepository:
    """Access to the ``maps`` table."""

    def load(self, db: UserProgressDB) -> list[MapInfo]:
        rows = db.execute("SELECT id, name FROM maps ORDER BY id")
        return [MapInfo(id=map_id, name=name) for map_id, name in rows]

    def get_by_id(self, db: UserProgressDB, map_id: int) -> MapInfo:
        rows = db.execute("SELECT id, name FROM maps WHERE id = ?", (map_id,))
        if not rows:
            raise LookupError(f"map {map_id} not found")
        found_id, name = rows[0]
        return MapInfo(id=found_id, name=name)

    def upsert(self, db: UserProgressDB, map_info: MapInfo) -> None:
        db.execute(
            "INSERT INTO maps (id, name) VALUES (?, ?) "
            "ON CONFLICT(id) DO UPDATE SET name = excluded.name",
            (map_info.id, map_info.name),
        )

    def count(self, db: UserProgressDB) -> int:
        return db.execute("SELECT count(*) FROM maps")[0][0]


class MapsProgressRepository:
    """Access to the ``map_progress`` table."""

    def load(self, db: UserProgressDB) -> list[MapProgress]:
        rows = db.execute("SELECT map_id, max_wave FROM map_progress ORDER BY map_id")
        return [MapProgress(map_id=map_id, max_wave=max_wave) for map_id, max_wave in rows]

    def exists(self, db: UserProgressDB, map_id: int) -> bool:
        return bool(db.execute("SELECT 1 FROM map_progress WHERE map_id = ?", (map_id,)))

    def upsert(self, db: UserProgressDB, map_progress: MapProgress) -> None:
        db.execute(
            "INSERT INTO map_progress (map_id, max_wave) VALUES (?, ?) "
            "ON CONFLICT(map_id) DO UPDATE SET max_wave = excluded.max_wave",
            (map_progress.map_id, map_progress.max_wave),
        )

    def update_max_wave(self, db: UserProgressDB, map_id: int, max_wave: int) -> None:
        """Store ``max_wave`` only when it beats the recorded best."""
        db.execute(
            "UPDATE map_progress SET max_wave = ? WHERE map_id = ? AND max_wave < ?",
            (max_wave, map_id, max_wave),
        )

    def delete_progress(self, db: UserProgressDB) -> None:
        """Reset every map's best wave to the default."""
        db.execute("UPDATE map_progress SET max_wave = ?", (DEFAULT_MAX_WAVE,))


class TowerUnlocksRepository:
    """Access to the ``tower_unlocks`` table."""

    def load_all(self, db: UserProgressDB) -> list[TowerUnlock]:
        rows = db.execute(
            "SELECT id, name, require_level, unlocked FROM tower_unlocks ORDER BY id"
        )
        return [
            TowerUnlock(id=tower_id, name=name, require_level=level, unlocked=bool(unlocked))
            for tower_id, name, level, unlocked in rows
        ]

    def unlock_tower(self, db: UserProgressDB, tower_id: int) -> None:
        db.execute("UPDATE tower_unlocks SET unlocked = 1 WHERE id = ?", (tower_id,))

    def reset_unlocks(self, db: UserProgressDB) -> None:
        db.execute("UPDATE tower_unlocks SET unlocked = 0")