"""A playable map: its tilesets, layers, enemy path and blocked areas."""

from __future__ import annotations

from dataclasses import dataclass, field

from rootdefence.geometry import Rect, Vector2
from rootdefence.tiles import ObjectLayer, TileDraw, TileLayer, Tileset


@dataclass
class Level:
    """Map data built by the level parser."""

    tile_size: int = 0
    width: int = 0
    height: int = 0
    tilesets: list[Tileset] = field(default_factory=list)
    layers: list[TileLayer | ObjectLayer] = field(default_factory=list)
    tile_type_ids: dict[str, set[int]] = field(default_factory=dict)
    spawn_point: Vector2 = field(default_factory=Vector2)
    enemy_path: list[Vector2] = field(default_factory=list)
    path_areas: list[Rect] = field(default_factory=list)

    def render(self) -> list[TileDraw]:
        """Render every layer in order and return the tiles to draw."""
        draws: list[TileDraw] = []
        for layer in self.layers:
            draws.extend(layer.render())
        return draws

    def update(self) -> None:
        for layer in self.layers:
            layer.update()

    def clean(self) -> list[str]:
        """Drop layers and path; return the tileset names whose textures can be released."""
        released = [tileset.name for tileset in self.tilesets]
        self.layers.clear()
        self.enemy_path.clear()
        return released