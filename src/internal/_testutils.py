# file: _testutils.py

from functools import partial
from typing import Final, List

import pygame as pg
import pytest  # pyright: ignore [reportUnusedImport]
from hypothesis import strategies as st

from internal.animation import Animation


_FRAME_SIZE: Final = (30, 30)

st_bools_held_keys = partial(st.tuples, st.booleans(), st.booleans(), st.booleans(), st.booleans())

st_unit_directions = partial(
    st.sampled_from,
    [pg.Vector2(-1, 0), pg.Vector2(1, 0), pg.Vector2(0, -1), pg.Vector2(0, 1)],
)


def make_animation(count: int = 3, frame_time: float = 0.1) -> Animation:
    """Animation over blank surfaces. Creating a Surface does not need a display."""
    images: List[pg.Surface] = [pg.Surface(_FRAME_SIZE, pg.SRCALPHA) for _ in range(count)]
    return Animation(images, frame_time=frame_time)

