# file: pacmaze/src/internal/prelude.py

"""This module contains all the classes, functions and constants used in the
game.
"""


import logging
import sys
from dataclasses import dataclass
from enum import Enum, unique
from functools import partial
from pathlib import Path
from typing import (
    Final,
    Optional,
    Sequence,
    Tuple,
    TypeAlias,
    Union,
)

import pygame as pg


logger = logging.getLogger(__name__)


################################################################################
### DFLAGS
################################################################################

DDEBUG: Final[bool] = "--debug" in sys.argv

# flags for debugging, etc
DEBUG_GAME_ASSERTS = False
DEBUG_GAME_CPROFILE = False
DEBUG_GAME_HUD = DDEBUG


################################################################################
### TYPES
################################################################################

Number: TypeAlias = int | float

# Ported from pygame source file: _common.py
RGBAOutput: TypeAlias = Tuple[int, int, int, int]
ColorValue: TypeAlias = pg.Color | Tuple[int, int, int] | RGBAOutput | Sequence[int]

# Ported from pygame source file: _common.py
Coordinate2: TypeAlias = Tuple[Number, Number] | Sequence[Number] | pg.Vector2


class EntityKind(Enum):
    ENEMY = "enemy"
    PLAYER = "player"


@unique
class TileKind(Enum):
    """Level map legend. Any other character is empty floor.

    Examples::

        >>> TileKind("W")
        <TileKind.WALL: 'W'>
    """

    WALL = "W"
    FOOD = "."
    PLAYER = "P"
    ENEMY = "E"


@dataclass
class Movement:
    """Movement is a dataclass of 4 booleans for each of the 4 cardinal
    directions the player can ask for. Note: False == 0 and True == 1

    Examples::

        >>> Movement(True, False, True, False)
        Movement(left=True, right=False, up=True, down=False)
    """

    left: bool
    right: bool
    up: bool
    down: bool

    def direction(self) -> pg.Vector2:
        """Return the requested unit direction in screen space (y grows
        downwards). Only one key wins: left, then right, then up, then down.

        Examples::

            >>> Movement(True, True, False, False).direction()
            <Vector2(-1, 0)>
            >>> Movement(False, False, True, True).direction()
            <Vector2(0, -1)>
            >>> Movement(False, False, False, False).direction()
            <Vector2(0, 0)>
        """
        if self.left:
            return pg.Vector2(-1, 0)
        if self.right:
            return pg.Vector2(1, 0)
        if self.up:
            return pg.Vector2(0, -1)
        if self.down:
            return pg.Vector2(0, 1)
        return pg.Vector2(0, 0)


################################################################################
### UTILS
################################################################################


def clamp(value: int | float, lo: int | float, hi: int | float) -> int | float:
    """
    Examples::

        >>> (clamp(15, 3, 11), clamp(5, 3, 11), clamp(-15, 3, 11))
        (11, 5, 3)
    """
    return min(max(value, lo), hi)


def check_aabb_collision(pos_a: Coordinate2, size_a: Coordinate2, pos_b: Coordinate2, size_b: Coordinate2) -> bool:
    """Return True if two axis aligned boxes overlap. Positions are box
    centres. Boxes that only touch along an edge do not collide.

    Examples::

        >>> check_aabb_collision((0, 0), (40, 40), (39, 0), (40, 40))
        True
        >>> check_aabb_collision((0, 0), (40, 40), (40, 0), (40, 40))
        False
    """
    distance_x = abs(pos_a[0] - pos_b[0])
    distance_y = abs(pos_a[1] - pos_b[1])
    min_distance_x = (size_a[0] / 2) + (size_b[0] / 2)
    min_distance_y = (size_a[1] / 2) + (size_b[1] / 2)
    return distance_x < min_distance_x and distance_y < min_distance_y


################################################################################
### FILE I/O
################################################################################


def load_img(path: str | Path, with_alpha: bool = False, colorkey: Union[ColorValue, None] = None) -> pg.Surface:
    """Load and return a pygame Surface image.

    Errors::
        Throws if No video mode has been set before calling this function.
        Ensure the following is called prior load_img(...)

        >>> import pygame as pg
        >>> screen = pg.display.set_mode(size=(1280, 720))
        >>> isinstance(screen, pg.SurfaceType)
        True
    """
    path = Path(path)
    logger.debug(f"loading image {path}")
    img = pg.image.load(path).convert_alpha() if with_alpha else pg.image.load(path).convert()
    if colorkey is not None:
        img.set_colorkey(colorkey)
    return img


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "on")


@dataclass
class UserConfig:
    """Configuration options for the game application.

    Usage::

        ```python
        def get_user_config(filepath: Path) -> UserConfig:
            config: Optional[dict[str, str]] = UserConfig.read_user_config(filepath=filepath)
            if not config:
                logger.error(f"error while reading configuration file at {filepath!r}")
                return UserConfig.from_dict({})
            return UserConfig.from_dict(config)
        ```
    """

    frame_time: float
    level_map: str
    player_lives: int
    player_speed: float
    show_fps: bool
    window_height: int
    window_width: int

    @classmethod
    def from_dict(cls, config_dict: dict[str, str]) -> "UserConfig":
        """Create a UserConfig instance from a dictionary.

        Handles converting string values to appropriate data types and setting
        defaults for missing keys.

        Raises:
            ValueError if a numeric value cannot be parsed or is out of range
        """
        known = cls.__annotations__.keys()
        for key in config_dict:
            if key not in known:
                logger.warning(f"ignoring unknown configuration key {key!r}")

        try:
            config = cls(
                frame_time=float(config_dict.get("frame_time", "0.1")),
                level_map=config_dict.get("level_map", ""),
                player_lives=int(config_dict.get("player_lives", "3")),
                player_speed=float(config_dict.get("player_speed", "200.0")),
                show_fps=_parse_bool(config_dict.get("show_fps", "false")),
                window_height=int(config_dict.get("window_height", "720")),
                window_width=int(config_dict.get("window_width", "1280")),
            )
        except ValueError as e:
            raise ValueError(f"invalid configuration value: {e}") from e

        if config.frame_time <= 0:
            raise ValueError(f"want frame_time > 0. got {config.frame_time}")
        if not 0 < config.player_speed <= MAX_PLAYER_SPEED:
            raise ValueError(f"want 0 < player_speed <= {MAX_PLAYER_SPEED}. got {config.player_speed}")
        if config.player_lives < 1:
            raise ValueError(f"want player_lives >= 1. got {config.player_lives}")
        if config.window_width <= 0 or config.window_height <= 0:
            raise ValueError(f"want positive window size. got {config.window_width}x{config.window_height}")
        return config

    @staticmethod
    def read_user_config(filepath: Path) -> Optional[dict[str, str]]:
        """Read configuration file and return a dictionary.

        Skips comments, empty lines, and returns None if file doesn't exist.

        Raises:
            ValueError if a line holds a key without a value
        """
        if not filepath.is_file():
            logger.error(f"error while locating file at {filepath!r}")
            return None

        logger.debug(f"reading configuration file at {filepath!r}")

        config: dict[str, str] = {}
        with open(filepath, "r") as f:
            for n, line in enumerate(f, start=1):
                if not (l := line.strip()) or l.startswith("#"):
                    continue
                match l.split(maxsplit=1):
                    case [k, v]:
                        config[k] = v
                    case _:
                        raise ValueError(f"want 'key value' at line {n}: {l!r}")
        return config


#############
# CONSTANTS #

FPS_CAP = 60
"""Frames per seconds.

FPS of 60 == 16 milliseconds per frame
1000ms / FPS = ms per frame.
"""

MAX_FRAME_DT = 0.05  # seconds. a stalled frame must not step through a wall

TILE_SIZE = 40
CHARACTER_SIZE = 40
PLAYER_SPEED = 200.0
MAX_PLAYER_SPEED = TILE_SIZE / MAX_FRAME_DT  # one tile per clamped frame
MAX_STEP = TILE_SIZE / 2  # longest single collision checked move
PLAYER_LIVES = 3
SNAP_THRESHOLD_RATIO = 1 / 5  # 8px on a 40px grid

FOOD_RADIUS = 4
FOOD_EAT_DISTANCE = 20.0

PLAYER_FRAME_SIZE = (30, 30)
PLAYER_FRAME_COUNT = 3
PLAYER_FRAME_TIME = 0.1

SCORE_FONT_SIZE = 40
SCORE_MARGIN = 20

LEVEL_MAP: Final[tuple[str, ...]] = (
    "WWWWWWWWWWWWWWW",
    "W.............W",
    "W...WW.WW.W.W.W",
    "W.P....E....W.W",
    "W...WWWWWWW.W.W",
    "W.............W",
    "WWWWWWWWWWWWWWW",
)

SCREEN_WIDTH, SCREEN_HEIGHT = 1280, 720
DIMENSIONS = (SCREEN_WIDTH, SCREEN_HEIGHT)

CAPTION = "pacmaze"

SRC_PATH = Path(__file__).resolve().parent.parent

SRC_DATA_PATH = SRC_PATH / "data"

# aliases for directory paths
CONFIG_PATH = SRC_PATH / "config" / "config"
IMGS_PATH = SRC_DATA_PATH / "images"
MAP_PATH = SRC_DATA_PATH / "maps"

# colors:
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

BLUE = (0, 0, 255)
RED = (255, 0, 0)
YELLOW = (255, 255, 0)

TRANSPARENT = (0, 0, 0, 0)


@dataclass
class COLOR:
    BACKGROUND = BLACK
    WALL = BLUE
    FOOD = (255, 204, 204)  # pinkish white pip
    PLAYER = YELLOW
    ENEMY = RED
    ENEMYEYE = WHITE
    ENEMYPUPIL = (33, 33, 222)
    SCORE = WHITE
    BANNER = YELLOW
    DEBUG = (127, 255, 127)


@dataclass
class SIZE:
    ENEMY = (CHARACTER_SIZE, CHARACTER_SIZE)
    PLAYER = (CHARACTER_SIZE, CHARACTER_SIZE)
    WALL = (TILE_SIZE, TILE_SIZE)
    FOOD = (FOOD_RADIUS * 2, FOOD_RADIUS * 2)


################################################################################
### SURFACE PYGAME
################################################################################


def create_surface(
    size: tuple[int, int], colorkey: tuple[int, int, int] | ColorValue, fill_color: tuple[int, int, int] | ColorValue
) -> pg.SurfaceType:
    """Plain filled surface. Does not need a display mode."""
    surf = pg.Surface(size)
    surf.set_colorkey(colorkey)
    surf.fill(fill_color)
    return surf


create_surface_partialfn = partial(create_surface, colorkey=TRANSPARENT)
create_surface_partialfn.__doc__ = """\
New create_surface function with partial application of colorkey argument and or other keywords.
"""


def create_circle_surf(size: tuple[int, int], fill_color: ColorValue) -> pg.SurfaceType:
    """Per pixel alpha surface with a filled circle touching its edges."""
    surf = pg.Surface(size, pg.SRCALPHA)
    ca, cb = iter(size)
    center = ca * 0.5, cb * 0.5
    radius = min(center)
    pg.draw.circle(surf, fill_color, center, radius)
    return surf


if __name__ == "__main__":
    import doctest

    doctest.testmod()
