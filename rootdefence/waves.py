"""Wave definitions and their JSON form."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

_WAVE_MANAGER = "waveManager"
_WAVES = "waves"
_SPAWN_INTERVAL = "spawnInterval"
_ROUND_INTERVAL = "roundInterval"
_ENEMY_CLUSTERS = "enemyClusters"
_ENEMY_TYPE = "enemyType"
_COUNT = "count"


@dataclass
class EnemyCluster:
    """A group of enemies of one type within a wave."""

    enemy_type: str
    count: int


@dataclass
class Wave:
    """One wave: clusters spawned every ``spawn_interval``, followed by ``round_interval``."""

    spawn_interval: float = 0.0
    round_interval: float = 0.0
    enemy_clusters: list[EnemyCluster] = field(default_factory=list)


def _field(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing key {key!r}") from None


def _number(data: Any, key: str) -> float:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key!r} must be a number")
    return float(value)


def _cluster_from_dict(data: Any) -> EnemyCluster:
    enemy_type = _field(data, _ENEMY_TYPE)
    count = _field(data, _COUNT)
    if not isinstance(enemy_type, str):
        raise ValueError(f"{_ENEMY_TYPE!r} must be a string")
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise ValueError(f"{_COUNT!r} must be a non-negative integer")
    return EnemyCluster(enemy_type, count)


def wave_from_dict(data: dict) -> Wave:
    """Build a wave from its JSON object."""
    clusters = _field(data, _ENEMY_CLUSTERS)
    if not isinstance(clusters, list):
        raise ValueError(f"{_ENEMY_CLUSTERS!r} must be a list")
    return Wave(
        spawn_interval=_number(data, _SPAWN_INTERVAL),
        round_interval=_number(data, _ROUND_INTERVAL),
        enemy_clusters=[_cluster_from_dict(cluster) for cluster in clusters],
    )


def wave_to_dict(wave: Wave) -> dict:
    """Return the JSON object for a wave."""
    return {
        _SPAWN_INTERVAL: wave.spawn_interval,
        _ROUND_INTERVAL: wave.round_interval,
        _ENEMY_CLUSTERS: [
            {_ENEMY_TYPE: cluster.enemy_type, _COUNT: cluster.count}
            for cluster in wave.enemy_clusters
        ],
    }


def waves_from_json(text: str) -> list[Wave]:
    """Parse waves from a JSON document.

    The document may be a list of waves, an object with a ``waves`` list,
    or an object holding such an object under ``waveManager``.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as error:
        raise ValueError(f"invalid waves JSON: {error}") from error
    if isinstance(document, dict) and _WAVE_MANAGER in document:
        document = document[_WAVE_MANAGER]
    if isinstance(document, dict):
        document = _field(document, _WAVES)
    if not isinstance(document, list):
        raise ValueError("waves must be a list")
    return [wave_from_dict(entry) for entry in document]


def waves_to_json(waves: list[Wave]) -> str:
    """Serialise waves to a JSON document with a ``waves`` list."""
    return json.dumps({_WAVES: [wave_to_dict(wave) for wave in waves]}, indent=2)


def load_waves(path: str | PathLike[str]) -> list[Wave]:
    """Read waves from a JSON file."""
    return waves_from_json(Path(path).read_text(encoding="utf-8"))