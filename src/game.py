# file: game.py

from __future__ import annotations

import logging
import sys
from enum import Enum, auto
from pathlib import Path
from typing import Final, List, NoReturn, Optional, Sequence

import pygame as pg  # pyright: ignore

import internal.prelude as pre
from internal.assets import Assets
from internal.entities import Enemy, Food, Player, Wall
from internal.hud import LivesText, ScoreText, render_banner, render_debug_hud
from internal.tilemap import Tilemap


logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# DATA STRUCTURES, TYPES AND ENUMS
# ------------------------------------------------------------------------------


class GameState(Enum):
    PLAY = auto()
    GAMEOVER = auto()
    CLEARED = auto()


MOVEMENT_KEYS: Final = {
    pg.K_LEFT: "left",
    pg.K_a: "left",
    pg.K_RIGHT: "right",
    pg.K_d: "right",
    pg.K_UP: "up",
    pg.K_w: "up",
    pg.K_DOWN: "down",
    pg.K_s: "down",
}


# ------------------------------------------------------------------------------
# MODULE FUNCTION DEFINITIONS
# ------------------------------------------------------------------------------


def quit_exit(context: str = "") -> NoReturn:
    if context:
        logger.info(context)

    pg.quit()
    sys.exit()


def get_user_config(filepath: Path) -> pre.UserConfig:
    config: Optional[dict[str, str]] = pre.UserConfig.read_user_config(filepath=filepath)

    if not config:
        logger.error(f"error while reading configuration file at {filepath!r}, using defaults")
        return pre.UserConfig.from_dict({})

    return pre.UserConfig.from_dict(config)


# -----------------------------------------------------------------------------
# GAME
# -----------------------------------------------------------------------------


class Game:
    def __init__(self, config: Optional[pre.UserConfig] = None) -> None:
        pg.init()

        self.config: Final[pre.UserConfig] = config if config is not None else get_user_config(pre.CONFIG_PATH)

        self.screen_size = (self.config.window_width, self.config.window_height)
        self.screen = pg.display.set_mode(self.screen_size)
        pg.display.set_caption(pre.CAPTION)

        # None picks the font bundled with pygame
        self.font = pg.font.Font(None, pre.SCORE_FONT_SIZE)
        self.font_hud = pg.font.Font(None, 18)

        self.clock = pg.time.Clock()
        self.dt: float = 0.0

        self.movement = pre.Movement(left=False, right=False, up=False, down=False)

        self.assets = Assets.initialize_assets(frame_time=self.config.frame_time)

        self.score_text = ScoreText(self.font, self.screen_size)
        self.lives_text = LivesText(self.font, self.screen_size)
        self.show_debug_hud = pre.DEBUG_GAME_HUD or self.config.show_fps

        self.tilemap: Tilemap
        self.player: Player
        self.walls: List[Wall] = []
        self.foods: List[Food] = []
        self.enemies: List[Enemy] = []
        self.score = 0
        self.state = GameState.PLAY

        self.running = False

        self.load_level()

    def load_level(self, rows: Optional[Sequence[str]] = None) -> None:
        """Spawn walls, food, the player and enemies from the level map and
        reset score and state."""
        if rows is not None:
            self.tilemap = Tilemap.from_rows(rows, self.screen_size)
        elif self.config.level_map:
            path = Path(self.config.level_map)
            self.tilemap = Tilemap.load(path if path.is_absolute() else pre.MAP_PATH / path, self.screen_size)
        else:
            self.tilemap = Tilemap.from_rows(pre.LEVEL_MAP, self.screen_size)

        tk = pre.TileKind
        self.walls = [Wall(tile.pos) for tile in self.tilemap.extract((tk.WALL,))]
        self.foods = [Food(tile.pos) for tile in self.tilemap.extract((tk.FOOD,))]
        self.enemies = [Enemy(tile.pos, self.assets.entity["enemy"]) for tile in self.tilemap.extract((tk.ENEMY,))]

        (player_tile,) = self.tilemap.extract((tk.PLAYER,))
        self.player = Player(
            player_tile.pos,
            self.assets.animations_entity[pre.EntityKind.PLAYER.value]["run"].copy(),
            lives=self.config.player_lives,
            speed=self.config.player_speed,
        )

        self.movement = pre.Movement(left=False, right=False, up=False, down=False)
        self.score = 0
        self.state = GameState.PLAY

        logger.info(
            f"level loaded: {self.tilemap.width}x{self.tilemap.height} tiles, "
            f"{len(self.walls)} walls, {len(self.foods)} food, {len(self.enemies)} enemies"
        )

    def run(self) -> None:
        """This game loop runs continuously until the player opts out via inputs.

        Each iteration, computes user input non-blocking events, updates state
        of the game, and renders the game.
        """
        self.running = True

        while self.running:
            dt = pre.clamp(self.clock.tick(pre.FPS_CAP) * 0.001, 0.0, pre.MAX_FRAME_DT)

            self.events()
            self.update(dt)
            self.render()

    def events(self) -> None:
        for event in pg.event.get():
            self.handle_event(event)

    def handle_event(self, event: pg.event.Event) -> None:
        if event.type == pg.QUIT:
            quit_exit("Exiting...")
        if event.type == pg.KEYDOWN:
            if event.key in (pg.K_ESCAPE, pg.K_F4):
                quit_exit("Exiting...")
            if event.key == pg.K_r and self.state != GameState.PLAY:
                self.load_level()
            if name := MOVEMENT_KEYS.get(event.key):
                setattr(self.movement, name, True)
        if event.type == pg.KEYUP:
            if name := MOVEMENT_KEYS.get(event.key):
                setattr(self.movement, name, False)

    # Systems, one per frame each, in this order.
    # -------------------------------------------------------------------------

    def move_player(self, dt: float) -> bool:
        return self.player.update(self.movement.direction(), self.walls, dt, self.tilemap)

    def eat_food(self) -> int:
        """Remove every pip the player is over and score one point each."""
        eaten = [food for food in self.foods if food.is_eaten_by(self.player)]
        if not eaten:
            return 0

        self.foods = [food for food in self.foods if food not in eaten]
        self.score += len(eaten)

        if not self.foods:
            logger.info(f"maze cleared with score {self.score}")
            self.state = GameState.CLEARED

        return len(eaten)

    def check_enemy_contact(self) -> bool:
        """Touching an enemy costs a life and sends the player back to spawn."""
        if not any(self.player.collides_with(enemy) for enemy in self.enemies):
            return False

        self.player.lives = max(0, self.player.lives - 1)
        logger.debug(f"player hit at {self.player.pos}, lives left {self.player.lives}")

        if self.player.lives == 0:
            logger.info(f"game over with score {self.score}")
            self.state = GameState.GAMEOVER
        else:
            self.player.respawn()

        return True

    def animate_player(self, dt: float) -> None:
        self.player.animation.update(dt)

    def update_score_ui(self) -> bool:
        score_changed = self.score_text.set_value(self.score)
        lives_changed = self.lives_text.set_value(self.player.lives)
        return score_changed or lives_changed

    # -------------------------------------------------------------------------

    def update(self, dt: float) -> None:
        self.dt = dt

        if self.state == GameState.PLAY:
            self.move_player(dt)
            self.eat_food()
            if self.state == GameState.PLAY:
                self.check_enemy_contact()
            self.animate_player(dt)

        self.update_score_ui()

    def render(self) -> None:
        """Render display."""
        self.screen.fill(pre.COLOR.BACKGROUND)

        self.tilemap.render(self.screen, self.assets.tiles["wall"])

        food_img = self.assets.tiles["food"]
        for food in self.foods:
            food.render(self.screen, food_img)

        for enemy in self.enemies:
            enemy.render(self.screen)

        if self.state != GameState.GAMEOVER:
            self.player.render(self.screen)

        self.score_text.render(self.screen)
        self.lives_text.render(self.screen)

        match self.state:
            case GameState.GAMEOVER:
                render_banner(self.screen, self.font, "GAME OVER - press R")
            case GameState.CLEARED:
                render_banner(self.screen, self.font, "MAZE CLEARED - press R")
            case _:
                pass

        if self.show_debug_hud:
            render_debug_hud(self, self.screen)

        pg.display.flip()


# ------------------------------------------------------------------------------
# GAME LAUNCHER
# ------------------------------------------------------------------------------


class Launcher(Game):
    def __init__(self) -> None:
        super().__init__()

    def start(self) -> None:
        logger.info(f"starting {pre.CAPTION}")
        self.run()
