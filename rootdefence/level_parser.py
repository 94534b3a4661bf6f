"""Reading levels from TMX map files."""

from __future__ import annotations

import base64
import binascii
import re
import struct
import xml.etree.ElementTree as ET
import zlib
from os import PathLike
from pathlib import Path
from typing import Any, Callable

from rootdefence.geometry import Rect, Vector2
from rootdefence.level import Level
from rootdefence.tiles import ObjectLayer, TileLayer, Tileset

IMAGE_DIR = "src/assets/Map/"

_INT_PREFIX = re.compile(r"[-+]?[0-9]+")
_FLOAT_PREFIX = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")
_NUMERIC_START = re.compile(r"-?[0-9]")


def _stoi(text: str) -> int:
    match = _INT_PREFIX.match(text.lstrip())
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group())


def _stof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text.lstrip())
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group())


def _int_attr(element: ET.Element, name: str, default: int = 0) -> int:
    value = element.get(name)
    if value is None:
        return default
    match = _INT_PREFIX.match(value.lstrip())
    return int(match.group()) if match else default


def _float_attr(element: ET.Element, name: str, default: float = 0.0) -> float:
    value = element.get(name)
    if value is None:
        return default
    match = _FLOAT_PREFIX.match(value.lstrip())
    return float(match.group()) if match else default


def parse_property_value(value: str) -> int | float | str:
    """Type a property value: numbers with a dot become floats, other numbers ints."""
    if _NUMERIC_START.match(value):
        if "." in value:
            return _stof(value)
        return _stoi(value)
    return value


def parse_polyline_points(points: str, object_x: float, object_y: float) -> list[Vector2]:
    """Parse ``"x,y x,y ..."`` into points offset by the object's position."""
    result = []
    for pair in points.split(" "):
        parts = pair.split(",")
        if len(parts) < 2 or (len(parts) == 2 and parts[1] == ""):
            continue
        result.append(Vector2(object_x + _stof(parts[0]), object_y + _stof(parts[1])))
    return result


def parse_tile_ids(tile_ids: str, first_grid_id: int) -> set[int]:
    """Parse a comma-separated list of local tile ids into global ids."""
    tokens = tile_ids.split(",")
    if tokens[-1] == "":
        tokens.pop()
    return {_stoi(token) + first_grid_id for token in tokens}


class LevelParser:
    """Builds a Level from TMX; objects are made by ``object_factory(type_name)``."""

    def __init__(self, object_factory: Callable[[str], Any]) -> None:
        self._object_factory = object_factory

    def parse(self, path: str | PathLike[str]) -> Level:
        """Read a level from a TMX file."""
        return self.parse_string(Path(path).read_text(encoding="utf-8"))

    def parse_string(self, text: str) -> Level:
        """Read a level from TMX text."""
        try:
            root = ET.fromstring(text)
        except ET.ParseError as error:
            raise ValueError(f"invalid level XML: {error}") from error

        tile_size = _int_attr(root, "tilewidth")
        columns = _int_attr(root, "width")
        rows = _int_attr(root, "height")
        level = Level(tile_size=tile_size, width=columns * tile_size, height=rows * tile_size)

        for element in root.findall("tileset"):
            level.tilesets.append(self._parse_tileset(element))
        for element in root.findall("layer"):
            level.layers.append(
                self._parse_tile_layer(element, columns, rows, tile_size, level.tilesets)
            )
        for element in root.findall("objectgroup"):
            name = element.get("name")
            if name == "EntitiesPaths":
                self._parse_paths_layer(element, level)
            elif name == "ObjectLayer":
                level.layers.append(self._parse_object_layer(element))
        return level

    @staticmethod
    def _parse_tileset(element: ET.Element) -> Tileset:
        tileset = Tileset(
            name=element.get("name", ""),
            first_grid_id=_int_attr(element, "firstgid"),
            tile_width=_int_attr(element, "tilewidth"),
            tile_height=_int_attr(element, "tileheight"),
            spacing=_int_attr(element, "spacing"),
            margin=_int_attr(element, "margin"),
        )
        for image in element.findall("image"):
            tileset.image_source = IMAGE_DIR + image.get("source", "")
            tileset.width = _int_attr(image, "width")
            tileset.height = _int_attr(image, "height")
        step = tileset.tile_width + tileset.spacing
        if step <= 0:
            raise ValueError(f"tileset {tileset.name!r} has no tile width")
        tileset.num_columns = tileset.width // step
        return tileset

    @staticmethod
    def _parse_tile_layer(
        element: ET.Element,
        columns: int,
        rows: int,
        tile_size: int,
        tilesets: list[Tileset],
    ) -> TileLayer:
        data = element.find("data")
        if data is None:
            raise ValueError("tile layer has no data")
        encoded = "".join(data.itertext()).strip()
        try:
            raw = zlib.decompress(base64.b64decode(encoded))
        except (binascii.Error, zlib.error) as error:
            raise ValueError(f"cannot decode tile data: {error}") from error

        count = columns * rows
        if len(raw) < count * 4:
            raise ValueError("tile data is shorter than the map")
        gids = struct.unpack_from(f"<{count}I", raw)

        layer = TileLayer(columns, rows, tile_size, tilesets)
        layer.tile_ids = [list(gids[start : start + columns]) for start in range(0, count, columns)]
        return layer

    def _parse_object_layer(self, element: ET.Element) -> ObjectLayer:
        layer = ObjectLayer()
        for object_element in element.findall("object"):
            game_object = self._object_factory(object_element.get("type", ""))
            params: dict[str, Any] = {
                "x": _float_attr(object_element, "x"),
                "y": _float_attr(object_element, "y"),
            }
            for properties in object_element.findall("properties"):
                for prop in properties.findall("property"):
                    name = prop.get("name") or ""
                    value = prop.get("value")
                    if not name or value is None:
                        continue
                    params[name] = parse_property_value(value)
            game_object.load(params)
            layer.game_objects.append(game_object)
        return layer

    @staticmethod
    def _parse_paths_layer(element: ET.Element, level: Level) -> None:
        for child in element:
            name = child.get("name")
            if name == "enemyPath":
                points = ""
                for polyline in child.findall("polyline"):
                    points = polyline.get("points", "")
                level.enemy_path = parse_polyline_points(
                    points, _float_attr(child, "x"), _float_attr(child, "y")
                )
            elif name == "enemyPathArea":
                level.path_areas.append(
                    Rect(
                        _int_attr(child, "x"),
                        _int_attr(child, "y"),
                        _int_attr(child, "width"),
                        _int_attr(child, "height"),
                    )
                )