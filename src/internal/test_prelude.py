# file: test_prelude.py

import logging
import math
import sys
import unittest
from pathlib import Path
from typing import Dict, Tuple

import pygame as pg
import pytest
from hypothesis import example, given
from hypothesis import strategies as st


try:
    from internal import prelude
    from internal._testutils import st_bools_held_keys
    from internal.prelude import (
        DDEBUG,
        LEVEL_MAP,
        Movement,
        Number,
        TileKind,
        UserConfig,
        check_aabb_collision,
        clamp,
    )
except ImportError or OSError as e:
    logging.error(f'something went wrong while importing module(s): {e}')
    raise


# -----------------------------------------------------------------------------
# Test Movement
# -----------------------------------------------------------------------------


class TestMovement:
    @pytest.mark.parametrize(
        "held, want",
        [
            ((False, False, False, False), (0, 0)),
            ((True, False, False, False), (-1, 0)),
            ((False, True, False, False), (1, 0)),
            ((False, False, True, False), (0, -1)),
            ((False, False, False, True), (0, 1)),
            ((True, True, True, True), (-1, 0)),  # left wins over everything
            ((False, True, True, True), (1, 0)),
            ((False, False, True, True), (0, -1)),
        ],
    )
    def test_direction_priority(self, held: Tuple[bool, bool, bool, bool], want: Tuple[int, int]):
        assert Movement(*held).direction() == pg.Vector2(want)

    @given(held=st_bools_held_keys())
    def test_direction_is_unit_or_zero(self, held: Tuple[bool, bool, bool, bool]):
        direction = Movement(*held).direction()
        if any(held):
            assert direction.length() == 1
            assert 0 in (direction.x, direction.y)
        else:
            assert direction.length() == 0


# -----------------------------------------------------------------------------
# Test Collision
# -----------------------------------------------------------------------------


class TestAabbCollision:
    def test_overlapping_boxes_collide(self):
        assert check_aabb_collision((0, 0), (40, 40), (39.9, 0), (40, 40))
        assert check_aabb_collision((0, 0), (40, 40), (0, -39.9), (40, 40))

    def test_touching_edges_do_not_collide(self):
        assert not check_aabb_collision((0, 0), (40, 40), (40, 0), (40, 40))
        assert not check_aabb_collision((0, 0), (40, 40), (0, 40), (40, 40))

    def test_needs_overlap_on_both_axes(self):
        assert not check_aabb_collision((0, 0), (40, 40), (10, 50), (40, 40))

    @given(
        ax=st.floats(-1000, 1000),
        ay=st.floats(-1000, 1000),
        bx=st.floats(-1000, 1000),
        by=st.floats(-1000, 1000),
        size=st.floats(1, 100),
    )
    @example(ax=0.0, ay=0.0, bx=40.0, by=0.0, size=40.0)
    def test_symmetric(self, ax: float, ay: float, bx: float, by: float, size: float):
        a, b, s = (ax, ay), (bx, by), (size, size)
        assert check_aabb_collision(a, s, b, s) == check_aabb_collision(b, s, a, s)

    def test_accepts_vectors(self):
        assert check_aabb_collision(pg.Vector2(0, 0), pg.Vector2(40, 40), pg.Vector2(20, 20), pg.Vector2(40, 40))


def test_clamp():
    assert (clamp(15, 3, 11), clamp(5, 3, 11), clamp(-15, 3, 11)) == (11, 5, 3)
    assert (clamp(float("-inf"), 3, 11), clamp(float("inf"), 3, 11)) == (3, 11)


# -----------------------------------------------------------------------------
# Test Level Map
# -----------------------------------------------------------------------------


def test_level_map_is_rectangular_and_walled():
    width = len(LEVEL_MAP[0])
    assert all(len(row) == width for row in LEVEL_MAP)
    assert set(LEVEL_MAP[0]) == {TileKind.WALL.value}
    assert set(LEVEL_MAP[-1]) == {TileKind.WALL.value}
    assert all(row[0] == row[-1] == TileKind.WALL.value for row in LEVEL_MAP)
    assert sum(row.count(TileKind.PLAYER.value) for row in LEVEL_MAP) == 1


# -----------------------------------------------------------------------------
# Test File I/O
# -----------------------------------------------------------------------------


class TestUserConfig(unittest.TestCase):
    def test_user_config_from_dict_defaults(self):
        cfg = UserConfig.from_dict({})
        self.assertEqual((cfg.window_width, cfg.window_height), (1280, 720))
        self.assertEqual(cfg.player_speed, 200.0)
        self.assertEqual(cfg.player_lives, 3)
        self.assertEqual(cfg.frame_time, 0.1)
        self.assertEqual(cfg.level_map, "")
        self.assertFalse(cfg.show_fps)

    def test_user_config_from_dict_converts_values(self):
        cfg = UserConfig.from_dict(
            {"player_speed": "150", "player_lives": "5", "show_fps": "True", "level_map": "0.txt"}
        )
        self.assertEqual(cfg.player_speed, 150.0)
        self.assertEqual(cfg.player_lives, 5)
        self.assertTrue(cfg.show_fps)
        self.assertEqual(cfg.level_map, "0.txt")

    def test_user_config_from_dict_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            UserConfig.from_dict({"window_width": "wide"})
        with self.assertRaises(ValueError):
            UserConfig.from_dict({"frame_time": "0"})
        with self.assertRaises(ValueError):
            UserConfig.from_dict({"player_lives": "0"})

    def test_user_config_player_speed_bounds(self):
        for speed in ("0", "-10", str(prelude.MAX_PLAYER_SPEED + 1), "2000"):
            with self.assertRaises(ValueError, msg=speed):
                UserConfig.from_dict({"player_speed": speed})
        cfg = UserConfig.from_dict({"player_speed": str(prelude.MAX_PLAYER_SPEED)})
        self.assertEqual(cfg.player_speed, prelude.MAX_PLAYER_SPEED)

    def test_user_config_unknown_key_is_ignored(self):
        with self.assertLogs("internal.prelude", level="WARNING"):
            cfg = UserConfig.from_dict({"ghost_count": "4"})
        self.assertEqual(cfg.window_width, 1280)


def test_user_config_read_user_config(tmp_path: Path):
    config_content = """
    window_width        800
    window_height       600
    #-------------------------
    #player_speed       5
    player_lives        4
    ####
    show_fps            true
    """
    config_path = tmp_path / 'config'
    config_path.write_text(config_content)
    config_dict = UserConfig.read_user_config(config_path)
    assert config_dict is not None and isinstance(config_dict, Dict)
    assert config_dict['window_width'] == '800'
    assert config_dict['window_height'] == '600'
    assert config_dict['player_lives'] == '4'
    assert config_dict['show_fps'] == 'true'
    assert 'player_speed' not in config_dict, 'expected commented-out config-attribute to be skipped'


def test_user_config_read_key_without_value(tmp_path: Path):
    config_path = tmp_path / 'config'
    config_path.write_text("window_width 1280\n# comment\nshow_fps\n")
    with pytest.raises(ValueError, match=r"line 3: 'show_fps'"):
        UserConfig.read_user_config(config_path)


def test_user_config_read_missing_file(tmp_path: Path):
    assert UserConfig.read_user_config(tmp_path / 'nope') is None


def test_shipped_config_parses():
    config_dict = UserConfig.read_user_config(prelude.CONFIG_PATH)
    assert config_dict
    cfg = UserConfig.from_dict(config_dict)
    assert (cfg.window_width, cfg.window_height) == prelude.DIMENSIONS


# -----------------------------------------------------------------------------
# Test Global Flags
# -----------------------------------------------------------------------------


class TestDebugFlags:
    def test_truthy_DDEBUG_if_debug_option_stdin_sys_argv(self):
        assert DDEBUG if "--debug" in sys.argv else not DDEBUG

    @pytest.mark.skipif(DDEBUG, reason="Expected debug flags in prelude to be set as follows for public build")
    def test_expect_debug_flags_for_public_build(self):
        assert prelude.DEBUG_GAME_ASSERTS is False
        assert prelude.DEBUG_GAME_CPROFILE is False
        assert prelude.DEBUG_GAME_HUD is False


# -----------------------------------------------------------------------------
# Test Custom Type Aliases
# -----------------------------------------------------------------------------


@given(st.integers(-(1 << 64), (1 << 64)), st.floats(-math.inf, math.inf))
@example(1, 0.0)
def test_Number(st_int: int, st_float: float):
    for test in (st_int, st_float):
        assert isinstance(test, Number)


if __name__ == "__main__":
    unittest.main()
