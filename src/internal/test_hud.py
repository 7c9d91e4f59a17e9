# file: test_hud.py

import logging
from typing import Final

import pygame as pg
import pytest
from hypothesis import given
from hypothesis import strategies as st


try:
    from internal.hud import LivesText, ScoreText, draw_text, render_banner
    from internal.prelude import SCORE_FONT_SIZE, SCORE_MARGIN
except ImportError or OSError as e:
    logging.error(f'something went wrong while importing module(s): {e}')
    raise


SCREEN: Final = (1280, 720)


@pytest.fixture(scope='module')
def font():
    pg.font.init()
    yield pg.font.Font(None, SCORE_FONT_SIZE)


def test_score_text_starts_at_zero(font: pg.font.Font):
    score = ScoreText(font, SCREEN)
    assert score.text == 'Score: 0'
    surf = pg.Surface(SCREEN)
    score.render(surf)
    assert score.renders == 1


def test_score_text_rerenders_only_on_change(font: pg.font.Font):
    score = ScoreText(font, SCREEN)
    assert score.set_value(0)
    assert not score.set_value(0)
    assert score.set_value(3)
    assert score.text == 'Score: 3'
    assert not score.set_value(3)
    assert score.renders == 2


@given(value=st.integers(0, 10_000))
def test_score_text_format(value: int):
    pg.font.init()
    score = ScoreText(pg.font.Font(None, SCORE_FONT_SIZE), SCREEN)
    score.set_value(value)
    assert score.text == f'Score: {value}'


def test_score_text_anchored_bottom_right(font: pg.font.Font):
    score = ScoreText(font, SCREEN)
    score.set_value(12)
    dest = score.dest()
    assert dest.right == SCREEN[0] - SCORE_MARGIN
    assert dest.bottom == SCREEN[1] - SCORE_MARGIN


def test_lives_text_anchored_bottom_left(font: pg.font.Font):
    lives = LivesText(font, SCREEN)
    lives.set_value(3)
    assert lives.text == 'Lives: 3'
    dest = lives.dest()
    assert dest.left == SCORE_MARGIN
    assert dest.bottom == SCREEN[1] - SCORE_MARGIN


def test_draw_text_midtop(font: pg.font.Font):
    surf = pg.Surface((200, 100))
    rect = draw_text(surf, 100, 10, font, (255, 255, 255), 'hi')
    assert rect.top == 10
    assert abs(rect.centerx - 100) <= 1


def test_render_banner_centred(font: pg.font.Font):
    surf = pg.Surface((400, 300))
    rect = render_banner(surf, font, 'GAME OVER')
    assert abs(rect.centerx - 200) <= 1 and abs(rect.centery - 150) <= 1
