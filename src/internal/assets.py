import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Final, List

import pygame as pg

import internal.prelude as pre
from internal.animation import Animation
from internal.spritesheet import Spritesheet


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Assets:
    entity: Dict[str, pg.SurfaceType]
    tiles: Dict[str, pg.SurfaceType]

    animations_entity: "AnimationEntity"

    @dataclass
    class AnimationEntity:
        player: Dict[str, Animation]

        @property
        def elems(self) -> Dict[str, Dict[str, Animation]]:
            return {
                pre.EntityKind.PLAYER.value: self.player,
            }

        def __getitem__(self, key: str) -> Dict[str, Animation]:
            return self.elems[key]

    @classmethod
    def initialize_assets(cls, images_path: Path = pre.IMGS_PATH, frame_time: float = pre.PLAYER_FRAME_TIME) -> "Assets":
        """Load art from `images_path`. Art that is not there is drawn instead."""
        pacman_path: Final = images_path / "pacman.png"
        ghost_path: Final = images_path / "ghost.png"

        if pacman_path.is_file():
            player_frames = Spritesheet(pacman_path).load_grid(pre.PLAYER_FRAME_SIZE, pre.PLAYER_FRAME_COUNT, 1)
        else:
            logger.info(f"no player spritesheet at {pacman_path}, drawing frames")
            player_frames = cls.create_player_frames(pre.PLAYER_FRAME_SIZE, pre.PLAYER_FRAME_COUNT)

        if ghost_path.is_file():
            enemy = pg.transform.scale(pre.load_img(ghost_path, with_alpha=True), pre.SIZE.ENEMY)
        else:
            logger.info(f"no enemy image at {ghost_path}, drawing one")
            enemy = cls.create_enemy_surface(pre.SIZE.ENEMY)

        return cls(
            entity=dict(
                enemy=enemy,
            ),
            tiles=dict(
                wall=pre.create_surface_partialfn(size=pre.SIZE.WALL, fill_color=pre.COLOR.WALL),
                food=pre.create_circle_surf(pre.SIZE.FOOD, pre.COLOR.FOOD),
            ),
            animations_entity=cls.AnimationEntity(
                player=dict(
                    run=Animation(player_frames, frame_time=frame_time),
                ),
            ),
        )

    @staticmethod
    def create_player_frames(size: tuple[int, int], count: int) -> List[pg.SurfaceType]:
        """Yellow disc facing right with the mouth going from shut to wide open."""
        frames: List[pg.SurfaceType] = []
        w, h = size
        center = (w * 0.5, h * 0.5)
        radius = min(center)
        max_mouth: Final = math.radians(45)
        for i in range(count):
            surf = pg.Surface(size, pg.SRCALPHA)
            pg.draw.circle(surf, pre.COLOR.PLAYER, center, radius)
            mouth = max_mouth * i / max(1, count - 1)
            if mouth:
                tip_x = center[0] + radius * math.cos(mouth) * 1.5
                tip_y = radius * math.sin(mouth) * 1.5
                pg.draw.polygon(
                    surf,
                    pre.TRANSPARENT,
                    [center, (tip_x, center[1] - tip_y), (tip_x, center[1] + tip_y)],
                )
            frames.append(surf)
        return frames

    @staticmethod
    def create_enemy_surface(size: tuple[int, int]) -> pg.SurfaceType:
        surf = pg.Surface(size, pg.SRCALPHA)
        w, h = size
        radius = w * 0.5
        pg.draw.circle(surf, pre.COLOR.ENEMY, (radius, radius), radius)
        pg.draw.rect(surf, pre.COLOR.ENEMY, pg.Rect(0, radius, w, h - radius))
        for eye_x in (w * 0.3, w * 0.7):
            pg.draw.circle(surf, pre.COLOR.ENEMYEYE, (eye_x, h * 0.4), w * 0.12)
            pg.draw.circle(surf, pre.COLOR.ENEMYPUPIL, (eye_x + w * 0.04, h * 0.4), w * 0.05)
        return surf
