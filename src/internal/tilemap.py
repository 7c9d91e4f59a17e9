from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Final, Iterable, Optional, Sequence

import pygame as pg

import internal.prelude as pre


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapInfo:
    """Pixel centre of grid cell (0, 0) and the distance within which a turn
    snaps onto the nearest grid line."""

    offset_x: float
    offset_y: float
    snap_threshold: float


@dataclass
class TileItem:
    kind: pre.TileKind
    grid: tuple[int, int]  # (col, row)
    pos: pg.Vector2  # pixel centre

    def __hash__(self) -> int:
        return hash((self.kind, self.grid))

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, TileItem):
            return False
        return (self.kind, self.grid) == (other.kind, other.grid)


class Tilemap:
    """Fixed tile-grid maze parsed from rows of legend characters.

    The map is centred in the screen. Screen space grows right and down, so
    row 0 is the top row of the maze.
    """

    def __init__(
        self,
        rows: Sequence[str],
        screen_size: tuple[int, int] = pre.DIMENSIONS,
        tile_size: int = pre.TILE_SIZE,
    ) -> None:
        self.rows: Final[tuple[str, ...]] = self.validate_rows(rows)
        self.tilesize: int = tile_size
        self.screen_size = screen_size

        self.width: Final = len(self.rows[0])
        self.height: Final = len(self.rows)

        map_w = self.width * self.tilesize
        map_h = self.height * self.tilesize
        self.map_info: Final = MapInfo(
            offset_x=(screen_size[0] - map_w) / 2 + (self.tilesize / 2),
            offset_y=(screen_size[1] - map_h) / 2 + (self.tilesize / 2),
            snap_threshold=self.tilesize * pre.SNAP_THRESHOLD_RATIO,
        )

        self.tilemap: dict[tuple[int, int], TileItem] = {}
        for row_index, row in enumerate(self.rows):
            for col_index, char in enumerate(row):
                try:
                    kind = pre.TileKind(char)
                except ValueError:
                    continue  # empty floor
                self.tilemap[(col_index, row_index)] = TileItem(kind, (col_index, row_index), self.grid_to_pos(col_index, row_index))

        self._pg_rect_p_fn = partial(pg.Rect)
        self._pg_rect_p_fn.__doc__ = "This partial function takes pygame Rect style object parameters and returns a Rect."

    @classmethod
    def from_rows(
        cls, rows: Sequence[str], screen_size: tuple[int, int] = pre.DIMENSIONS, tile_size: int = pre.TILE_SIZE
    ) -> Tilemap:
        return cls(rows, screen_size, tile_size)

    @classmethod
    def load(
        cls, path: str | Path, screen_size: tuple[int, int] = pre.DIMENSIONS, tile_size: int = pre.TILE_SIZE
    ) -> Tilemap:
        """Read a plain text level. Blank lines and lines starting with '#' are
        skipped."""
        path = Path(path)
        try:
            with open(path, "r") as f:
                rows = [line.rstrip("\n") for line in f if line.strip() and not line.startswith("#")]
        except FileNotFoundError as e:
            logger.error(f"error loading level map: {e}")
            raise
        logger.info(f"loaded level map {path.name} ({len(rows)} rows)")
        return cls(rows, screen_size, tile_size)

    @staticmethod
    def validate_rows(rows: Sequence[str]) -> tuple[str, ...]:
        if not rows:
            raise ValueError("want at least one row in level map. got none")
        width = len(rows[0])
        if width == 0:
            raise ValueError("want non-empty rows in level map")
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"want rows of width {width}. got {len(row)} at row {index}: {row!r}")
        n_players = sum(row.count(pre.TileKind.PLAYER.value) for row in rows)
        if n_players != 1:
            raise ValueError(f"want exactly one player spawn in level map. got {n_players}")
        return tuple(rows)

    def grid_to_pos(self, col: int, row: int) -> pg.Vector2:
        """Grid cell to pixel centre."""
        return pg.Vector2(
            self.map_info.offset_x + col * self.tilesize,
            self.map_info.offset_y + row * self.tilesize,
        )

    def pos_to_grid(self, pos: pre.Coordinate2) -> tuple[int, int]:
        """Pixel position to the grid cell whose centre is nearest."""
        return (
            round((pos[0] - self.map_info.offset_x) / self.tilesize),
            round((pos[1] - self.map_info.offset_y) / self.tilesize),
        )

    def nearest_column_x(self, x: float) -> float:
        grid_x_index = round((x - self.map_info.offset_x) / self.tilesize)
        return self.map_info.offset_x + grid_x_index * self.tilesize

    def nearest_row_y(self, y: float) -> float:
        grid_y_index = round((y - self.map_info.offset_y) / self.tilesize)
        return self.map_info.offset_y + grid_y_index * self.tilesize

    def extract(self, kinds: Iterable[pre.TileKind]) -> list[TileItem]:
        """Tiles of the given kinds in row-major order."""
        wanted = set(kinds)
        return [
            tile
            for tile in sorted(self.tilemap.values(), key=lambda t: (t.grid[1], t.grid[0]))
            if tile.kind in wanted
        ]

    def wall_rects(self) -> list[pg.Rect]:
        half = self.tilesize / 2
        return [
            self._pg_rect_p_fn(tile.pos.x - half, tile.pos.y - half, self.tilesize, self.tilesize)
            for tile in self.extract((pre.TileKind.WALL,))
        ]

    def render(self, surf: pg.Surface, wall_surf: Optional[pg.Surface] = None) -> None:
        for rect in self.wall_rects():
            if wall_surf is not None:
                surf.blit(wall_surf, rect)
            else:
                pg.draw.rect(surf, pre.COLOR.WALL, rect)
