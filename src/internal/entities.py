from __future__ import annotations

import logging
import math
from typing import Final, Iterable, Optional

import pygame as pg

import internal.prelude as pre
from internal.animation import Animation
from internal.tilemap import Tilemap


logger = logging.getLogger(__name__)


# You don't need to use the build-in Sprite or Group classes. see  https://www.pygame.org/docs/tut/newbieguide.html
class Entity:
    def __init__(self, pos: pg.Vector2, size: pg.Vector2) -> None:
        self.pos: pg.Vector2 = pg.Vector2(pos)  # centre
        self.size = pg.Vector2(size)

    @property
    def rect(self) -> pg.Rect:
        """Return the rectangular bounds of the entity around its centre."""
        rect = pg.Rect(0, 0, int(self.size.x), int(self.size.y))
        rect.center = (round(self.pos.x), round(self.pos.y))
        return rect

    def collides_with(self, other: Entity) -> bool:
        return pre.check_aabb_collision(self.pos, self.size, other.pos, other.size)


class Wall(Entity):
    def __init__(self, pos: pg.Vector2, size: pg.Vector2 = pg.Vector2(pre.SIZE.WALL)) -> None:
        super().__init__(pos, size)


class Food(Entity):
    def __init__(self, pos: pg.Vector2) -> None:
        super().__init__(pos, pg.Vector2(pre.SIZE.FOOD))

    def is_eaten_by(self, player: Player) -> bool:
        return self.pos.distance_to(player.pos) < pre.FOOD_EAT_DISTANCE

    def render(self, surf: pg.SurfaceType, image: Optional[pg.SurfaceType] = None) -> None:
        if image is None:
            pg.draw.circle(surf, pre.COLOR.FOOD, self.pos, pre.FOOD_RADIUS)
        else:
            surf.blit(image, image.get_rect(center=(round(self.pos.x), round(self.pos.y))))


class Enemy(Entity):
    """Stationary enemy. Touching it costs the player a life."""

    def __init__(self, pos: pg.Vector2, image: pg.SurfaceType) -> None:
        super().__init__(pos, pg.Vector2(pre.SIZE.ENEMY))
        self.image = image

    def render(self, surf: pg.SurfaceType) -> None:
        surf.blit(self.image, self.image.get_rect(center=self.rect.center))


class Player(Entity):
    def __init__(
        self,
        pos: pg.Vector2,
        animation: Animation,
        lives: int = pre.PLAYER_LIVES,
        speed: float = pre.PLAYER_SPEED,
        size: pg.Vector2 = pg.Vector2(pre.SIZE.PLAYER),
    ) -> None:
        super().__init__(pos, size)
        self.spawn: Final = pg.Vector2(pos)
        self.animation = animation
        self.lives = lives
        self.speed = speed

        self.direction = pg.Vector2(0, 0)
        self.flip = False  # facing left

    def respawn(self) -> None:
        self.pos = self.spawn.copy()
        self.direction = pg.Vector2(0, 0)
        self.animation.reset()

    def is_free(self, pos: pg.Vector2, walls: Iterable[Wall]) -> bool:
        return not any(pre.check_aabb_collision(pos, self.size, wall.pos, wall.size) for wall in walls)

    def turn(self, requested: pg.Vector2, tilemap: Tilemap, walls: Iterable[Wall]) -> None:
        """Take the requested direction, snapping onto the grid line when the
        turn is a corner.

        A corner turn only happens within `snap_threshold` of the nearest grid
        line and only into an open cell, so holding a key while running down a
        corridor takes the turn at the next opening.
        """
        previous = self.direction
        if requested == pg.Vector2(0, 0) or requested == previous:
            return

        snap_threshold = tilemap.map_info.snap_threshold

        # Horizontal -> Vertical
        if requested.y != 0 and previous.x != 0:
            nearest_x = tilemap.nearest_column_x(self.pos.x)
            snapped = pg.Vector2(nearest_x, self.pos.y)
            # probe one pixel into the new lane
            if abs(self.pos.x - nearest_x) < snap_threshold and self.is_free(snapped + requested, walls):
                self.pos = snapped
                self.direction = requested.copy()
        # Vertical -> Horizontal
        elif requested.x != 0 and previous.y != 0:
            nearest_y = tilemap.nearest_row_y(self.pos.y)
            snapped = pg.Vector2(self.pos.x, nearest_y)
            if abs(self.pos.y - nearest_y) < snap_threshold and self.is_free(snapped + requested, walls):
                self.pos = snapped
                self.direction = requested.copy()
        # 180 degree reversal or starting from rest
        else:
            self.direction = requested.copy()

    def update(self, requested: pg.Vector2, walls: Iterable[Wall], dt: float, tilemap: Tilemap) -> bool:
        """Turn, then step along the current direction unless a wall is in the
        way. The step is split so that no part of it is longer than
        `MAX_STEP`. If even the first part is blocked the direction from the
        start of the frame is restored and the player stays put.

        Returns True if the player moved.
        """
        walls = tuple(walls)
        previous = self.direction.copy()
        self.turn(requested, tilemap, walls)

        if self.direction.x < 0:
            self.flip = True
        elif self.direction.x > 0:
            self.flip = False

        if self.direction.length() == 0:
            return False

        # sub steps, none long enough to pass a wall
        distance = self.speed * dt
        steps = max(1, math.ceil(distance / pre.MAX_STEP))
        step = self.direction * (distance / steps)

        moved = False
        for _ in range(steps):
            target = self.pos + step
            if not self.is_free(target, walls):
                break
            self.pos = target
            moved = True

        if not moved:
            self.direction = previous
            return False

        if pre.DEBUG_GAME_ASSERTS:
            assert self.is_free(self.pos, walls), f"player overlaps a wall at {self.pos}"
        return True

    def image(self) -> pg.SurfaceType:
        img = self.animation.img()
        # frames face right
        if self.direction.y < 0:
            return pg.transform.rotate(img, 90)
        if self.direction.y > 0:
            return pg.transform.rotate(img, -90)
        return pg.transform.flip(img, self.flip, False)

    def render(self, surf: pg.SurfaceType) -> None:
        img = self.image()
        surf.blit(img, img.get_rect(center=self.rect.center))
