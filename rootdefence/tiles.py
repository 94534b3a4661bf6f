"""Tilesets and the layers a level is drawn from."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable

from rootdefence.geometry import Vector2


@dataclass
class Tileset:
    """A tile sheet image cut into equally sized tiles."""

    name: str = ""
    first_grid_id: int = 0
    tile_width: int = 0
    tile_height: int = 0
    spacing: int = 0
    margin: int = 0
    width: int = 0
    height: int = 0
    num_columns: int = 0
    image_source: str = ""


@dataclass(frozen=True)
class TileDraw:
    """One tile to draw: which sheet cell goes to which screen position."""

    tileset: str
    tile_id: int
    margin: int
    spacing: int
    x: int
    y: int
    width: int
    height: int
    row: int
    column: int


class TileLayer:
    """A grid of tile ids drawn from one or more tilesets."""

    def __init__(
        self,
        num_columns: int,
        num_rows: int,
        tile_size: int,
        tilesets: Iterable[Tileset],
    ) -> None:
        self.num_columns = num_columns
        self.num_rows = num_rows
        self.tile_size = tile_size
        self.tilesets = list(tilesets)
        self.tile_ids: list[list[int]] = []
        self.position = Vector2(0, 0)
        self.velocity = Vector2(0, 0)

    def update(self) -> None:
        """Scroll the camera by the layer's velocity; a still layer stays put."""
        self.position = Vector2(
            self.position.x + self.velocity.x,
            self.position.y + self.velocity.y,
        )

    def render(self) -> list[TileDraw]:
        """Return the tiles to draw, offset by the camera position."""
        size = self.tile_size
        first_column = int(self.position.x / size)
        shift_x = int(math.fmod(int(self.position.x), size))
        shift_y = int(math.fmod(int(self.position.y), size))

        draws = []
        for row_index, row in enumerate(self.tile_ids[: self.num_rows]):
            visible = row[first_column : first_column + self.num_columns]
            for column_index, tile_id in enumerate(visible):
                if tile_id == 0:
                    continue
                tileset = self.tileset_for(tile_id)
                sheet_row, sheet_column = divmod(
                    tile_id - tileset.first_grid_id, tileset.num_columns
                )
                draws.append(
                    TileDraw(
                        tileset=tileset.name,
                        tile_id=tile_id,
                        margin=tileset.margin,
                        spacing=tileset.spacing,
                        x=column_index * size - shift_x,
                        y=row_index * size - shift_y,
                        width=size,
                        height=size,
                        row=sheet_row,
                        column=sheet_column,
                    )
                )
        return draws

    def tileset_for(self, tile_id: int) -> Tileset:
        """Return the tileset holding ``tile_id``; ids past the others fall to the last one."""
        if not self.tilesets:
            raise LookupError(f"no tileset for tile id {tile_id}")
        for current, following in zip(self.tilesets, self.tilesets[1:]):
            if current.first_grid_id <= tile_id < following.first_grid_id:
                return current
        return self.tilesets[-1]


class ObjectLayer:
    """A layer of game objects updated and drawn each frame."""

    def __init__(self, game_objects: Iterable[Any] = ()) -> None:
        self.game_objects = list(game_objects)

    def update(self) -> None:
        for game_object in self.game_objects:
            game_object.update()

    def render(self) -> list[TileDraw]:
        """Draw every object; an object layer contributes no tiles."""
        for game_object in self.game_objects:
            game_object.draw()
        return []