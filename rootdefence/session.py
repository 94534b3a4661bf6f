"""Resources and per-session game state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ResourceType(Enum):
    GREEN = 0
    YELLOW = 1
    RED = 2
    BLUE = 3

    @property
    def label(self) -> str:
        return self.name


def resource_type_from_string(name: str) -> ResourceType:
    """Return the resource type named exactly ``name`` (e.g. ``"GREEN"``)."""
    try:
        return ResourceType[name]
    except KeyError:
        raise ValueError(f"ResourceType: {name} not found.") from None


@dataclass
class Resource:
    """An amount of one kind of resource."""

    type: ResourceType
    value: int = 0


def _empty_resources() -> list[Resource]:
    return [Resource(resource_type, 0) for resource_type in ResourceType]


@dataclass
class GameSessionData:
    """State of a single play session."""

    game_health: int = 0
    resources: list[Resource] = field(default_factory=_empty_resources)
    current_wave_level: int = 0

    def resource(self, resource_type: ResourceType) -> Resource:
        """Return the held resource of the given type."""
        for resource in self.resources:
            if resource.type is resource_type:
                return resource
        raise KeyError(resource_type)