# file: hud.py

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Optional

import pygame as pg

import internal.prelude as pre


if TYPE_CHECKING:
    from game import Game


def draw_text(
    surface: pg.SurfaceType,
    x: int,
    y: int,
    font: pg.font.Font,
    color: pre.ColorValue,
    text: str,
    antialias: bool = True,
) -> pg.Rect:
    textsurf = font.render(text, antialias, color)
    textrect = textsurf.get_rect()
    textrect.midtop = (x, y)
    return surface.blit(textsurf, textrect)


class CounterText:
    """Label of the form "<label>: <value>" anchored to a bottom corner.

    The text surface is only re-rendered when the value changes.
    """

    def __init__(
        self,
        font: pg.font.Font,
        screen_size: tuple[int, int],
        label: str,
        anchor: Literal["bottomleft", "bottomright"],
        color: pre.ColorValue = pre.COLOR.SCORE,
        margin: int = pre.SCORE_MARGIN,
    ) -> None:
        self.font = font
        self.screen_size = screen_size
        self.label = label
        self.anchor = anchor
        self.color = color
        self.margin = margin

        self.value: Optional[int] = None
        self.surface: Optional[pg.SurfaceType] = None
        self.renders = 0

    @property
    def text(self) -> str:
        return f"{self.label}: {0 if self.value is None else self.value}"

    def set_value(self, value: int) -> bool:
        """Returns True if the value changed and the label was re-rendered."""
        if value == self.value:
            return False
        self.value = value
        self.surface = self.font.render(self.text, True, self.color)
        self.renders += 1
        return True

    def dest(self) -> pg.Rect:
        assert self.surface is not None, "set_value before rendering"
        w, h = self.screen_size
        rect = self.surface.get_rect()
        if self.anchor == "bottomright":
            rect.bottomright = (w - self.margin, h - self.margin)
        else:
            rect.bottomleft = (self.margin, h - self.margin)
        return rect

    def render(self, surf: pg.SurfaceType) -> None:
        if self.surface is None:
            self.set_value(0)
        assert self.surface is not None
        surf.blit(self.surface, self.dest())


class ScoreText(CounterText):
    def __init__(self, font: pg.font.Font, screen_size: tuple[int, int]) -> None:
        super().__init__(font, screen_size, "Score", "bottomright")


class LivesText(CounterText):
    def __init__(self, font: pg.font.Font, screen_size: tuple[int, int]) -> None:
        super().__init__(font, screen_size, "Lives", "bottomleft")


def render_banner(surface: pg.SurfaceType, font: pg.font.Font, text: str, color: pre.ColorValue = pre.COLOR.BANNER) -> pg.Rect:
    textsurf = font.render(text, True, color)
    return surface.blit(textsurf, textsurf.get_rect(center=surface.get_rect().center))


def render_debug_hud(game: Game, surface: Optional[pg.SurfaceType] = None) -> None:
    surface = game.screen if surface is None else surface

    keyfillchar, valfillchar = " ", " "
    keywidth, valwidth = 12, 14
    lineheight = 14

    huditems = (
        f"CLOCK_FPS.{game.clock.get_fps():2.0f}",
        f"CLOCK_DT*1000.{game.dt * 1000:.1f}",
        f"GAME_STATE.{game.state.name}",
        f"FOOD_LEFT.{len(game.foods)}",
        f"PLYR_POS.{game.player.pos.__round__(0)}",
        f"PLYR_DIR.{game.player.direction}",
        f"PLYR_LIVES.{game.player.lives}",
    )

    rowstart = surface.get_width() // 2
    colstart = pre.SCORE_MARGIN // 2
    for index, item in enumerate(huditems):
        key, val = item.split(".", maxsplit=1)
        text = f"{key.rjust(keywidth, keyfillchar)}  {val.ljust(valwidth, valfillchar)}"
        draw_text(surface, rowstart, colstart + index * lineheight, game.font_hud, pre.COLOR.DEBUG, text)
