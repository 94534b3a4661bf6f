"""Loading, seeding and updating the player's saved progress."""

from __future__ import annotations

from os import PathLike

from rootdefence.database import UserProgressDB
from rootdefence.dtos import GameProgress, MapInfo, MapProgress, TowerUnlock
from rootdefence.repositories import (
    DEFAULT_COINS,
    DEFAULT_LEVEL,
    DEFAULT_LEVEL_XP,
    DEFAULT_MAX_WAVE,
    GameProgressRepository,
    MapsProgressRepository,
    MapsRepository,
    TowerUnlocksRepository,
)

DEFAULT_PROGRESS_ID = 1

DEFAULT_MAPS = (
    MapInfo(id=1, name="Map 1"),
    MapInfo(id=2, name="Map 2"),
    MapInfo(id=3, name="Map 3"),
)


def default_game_progress() -> GameProgress:
    """A fresh game progress record."""
    return GameProgress(
        id=DEFAULT_PROGRESS_ID,
        coins=DEFAULT_COINS,
        level_xp=DEFAULT_LEVEL_XP,
        level=DEFAULT_LEVEL,
    )


class DatabaseSeeder:
    """Fills empty progress tables with their starting rows."""

    default_maps: tuple[MapInfo, ...] = DEFAULT_MAPS

    def __init__(
        self,
        game_repo: GameProgressRepository,
        maps_repo: MapsRepository,
        maps_progress_repo: MapsProgressRepository,
    ) -> None:
        self._game_repo = game_repo
        self._maps_repo = maps_repo
        self._maps_progress_repo = maps_progress_repo

    def seed(self, db: UserProgressDB) -> None:
        """Seed each table that has no rows; tables with rows are left alone."""
        if not self._game_repo.exists(db):
            self._game_repo.upsert(db, default_game_progress())
        if self._maps_repo.count(db) == 0:
            for map_info in self.default_maps:
                self._maps_repo.upsert(db, MapInfo(id=map_info.id, name=map_info.name))
        if not self._maps_progress_repo.load(db):
            for map_info in self._maps_repo.load(db):
                self._maps_progress_repo.upsert(
                    db, MapProgress(map_id=map_info.id, max_wave=DEFAULT_MAX_WAVE)
                )


class ProgressManager:
    """Holds the loaded progress and keeps it in step with the database."""

    def __init__(
        self,
        game_repo: GameProgressRepository,
        maps_repo: MapsRepository,
        maps_progress_repo: MapsProgressRepository,
        tower_unlocks_repo: TowerUnlocksRepository,
        db_context: UserProgressDB,
    ) -> None:
        self._game_repo = game_repo
        self._maps_repo = maps_repo
        self._maps_progress_repo = maps_progress_repo
        self._tower_unlocks_repo = tower_unlocks_repo
        self._db = db_context
        self.game_progress: GameProgress | None = None
        self.maps: list[MapInfo] = []
        self.maps_progress: list[MapProgress] = []
        self.tower_unlocks: list[TowerUnlock] = []

    def load_all(self, db_path: str | PathLike[str]) -> None:
        """Open the database, create and seed missing data, then load everything."""
        self._db.open(db_path)
        self._db.create_tables()
        DatabaseSeeder(self._game_repo, self._maps_repo, self._maps_progress_repo).seed(
            self._db
        )
        self._reload()

    def _reload(self) -> None:
        self.game_progress = self._game_repo.load(self._db)
        self.maps = self._maps_repo.load(self._db)
        self.maps_progress = self._maps_progress_repo.load(self._db)
        self.tower_unlocks = self._tower_unlocks_repo.load_all(self._db)

    def delete_progress(self) -> None:
        """Reset game, map and unlock progress to their defaults."""
        if self.game_progress is not None:
            self._game_repo.delete_progress(self._db, self.game_progress.id)
        self._maps_progress_repo.delete_progress(self._db)
        self._tower_unlocks_repo.reset_unlocks(self._db)
        self._reload()

    def close(self) -> None:
        self._db.close()

    def _loaded_progress(self, progress_id: int) -> GameProgress | None:
        if self.game_progress is not None and self.game_progress.id == progress_id:
            return self.game_progress
        return None

    def update_coins(self, progress_id: int, coins: int) -> None:
        """Set the coin total in the database and in the loaded progress."""
        self._game_repo.update_coins(self._db, progress_id, coins)
        progress = self._loaded_progress(progress_id)
        if progress is not None:
            progress.coins = coins

    def update_loaded_level(self, progress_id: int, level_xp: int, level: int) -> None:
        """Change the level in memory only; see ``update_level_to_db``."""
        progress = self._loaded_progress(progress_id)
        if progress is None:
            raise LookupError(f"game progress {progress_id} is not loaded")
        progress.level_xp = level_xp
        progress.level = level

    def update_level_to_db(self, progress_id: int) -> None:
        """Write the loaded level and experience to the database."""
        progress = self._loaded_progress(progress_id)
        if progress is None:
            raise LookupError(f"game progress {progress_id} is not loaded")
        self._game_repo.update_level(self._db, progress_id, progress.level_xp, progress.level)

    def get_map(self, map_id: int) -> MapInfo:
        return self._maps_repo.get_by_id(self._db, map_id)

    def upsert_map(self, map_info: MapInfo) -> None:
        self._maps_repo.upsert(self._db, map_info)
        self.maps = self._maps_repo.load(self._db)

    def update_max_wave(self, map_id: int, max_wave: int) -> None:
        """Record ``max_wave`` for the map when it beats the previous best."""
        self._maps_progress_repo.update_max_wave(self._db, map_id, max_wave)
        for progress in self.maps_progress:
            if progress.map_id == map_id and max_wave > progress.max_wave:
                progress.max_wave = max_wave

    def unlock_tower(self, tower_id: int) -> None:
        self._tower_unlocks_repo.unlock_tower(self._db, tower_id)
        for unlock in self.tower_unlocks:
            if unlock.id == tower_id:
                unlock.unlocked = True