"""The single-player screen: a scrolling view over a strip of block terrain."""

from __future__ import annotations

import random
from enum import Enum
from pathlib import Path
from typing import Iterable

import pygame

from blockmenu.engine import GRID_CELL, Engine
from blockmenu.state import GameContext, GameState

GAME_BACKGROUND_PATH = Path("images") / "backgrounds" / "SM_Background.png"
BLOCKS_ATLAS_PATH = Path("images") / "atlas" / "texture_atlas.png"
PLAYER_ATLAS_PATH = Path("images") / "atlas" / "steve_atlas.png"

TERRAIN_HEIGHT_RANGE = (200.0, 270.0)
TERRAIN_MARGIN = 16.0
VIEW_SIZE = (540.0, 400.0)
VIEW_STEP = 2.0
PLAYER_STEP = 2.5
PLAYER_SCALE = 0.3
IDLE_RECT = (0, 0, 50, 240)
BACKGROUND_TOP = -180.0
SKY_COLOR = (0, 255, 0)


class Block(Enum):
    """Blocks of the terrain, valued by their rectangle in the texture atlas."""

    GRASS = (0, 0, 16, 16)
    DIRT = (16, 0, 16, 16)
    STONE = (48, 0, 16, 16)
    BEDROCK = (64, 0, 16, 16)


def random_terrain_height(rng: random.Random | None = None) -> float:
    """Draw the height of the generated terrain, in pixels."""
    rng = rng if rng is not None else random.Random()
    return rng.uniform(*TERRAIN_HEIGHT_RANGE)


def terrain_rows(grid_height: int, window_height: float, terrain_height: float) -> list[tuple[int, Block]]:
    """List the grid rows that hold blocks, top to bottom, with their block.

    The bottom row is bedrock; the rows above it covered by the generated
    terrain are stone.
    """
    generated = int((window_height - terrain_height) / GRID_CELL)
    last = grid_height - 1
    return [
        (y, Block.BEDROCK if y == last else Block.STONE)
        for y in range(grid_height)
        if y == last or y >= grid_height - generated
    ]


def _crop(atlas: pygame.Surface, rect: tuple[int, int, int, int]) -> pygame.Surface:
    x, y, w, h = rect
    tile = pygame.Surface((w, h), pygame.SRCALPHA)
    tile.blit(atlas, (0, 0), pygame.Rect(x, y, w, h))
    return tile


class GameScreen(Engine):
    """Scrolls a fixed-size view over the terrain and walks the player."""

    def __init__(
        self,
        window: pygame.Surface,
        context: GameContext,
        asset_root: str | Path = "assets",
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(window, asset_root)
        self.context = context

        background = self._image(GAME_BACKGROUND_PATH)
        blocks_atlas = self._image(BLOCKS_ATLAS_PATH)
        player_atlas = self._image(PLAYER_ATLAS_PATH)

        width, height = window.get_size()
        self.view_center = (float(width // 2), float(height // 2))
        self.view_size = VIEW_SIZE

        self.terrain_height = random_terrain_height(rng)
        self.terrain_top = height - self.terrain_height - TERRAIN_MARGIN

        self.blocks = {block: _crop(blocks_atlas, block.value) for block in Block}
        self.background = pygame.transform.scale(background, (width, height))
        self.background_pos = (0.0, BACKGROUND_TOP)

        idle = _crop(player_atlas, IDLE_RECT)
        scaled_w = IDLE_RECT[2] * PLAYER_SCALE
        scaled_h = IDLE_RECT[3] * PLAYER_SCALE
        self.player_image = pygame.transform.scale(idle, (max(1, round(scaled_w)), max(1, round(scaled_h))))
        self.player_size = (scaled_w, scaled_h)
        # The origin is given in local units but sized from the scaled bounds.
        self.player_origin = (scaled_w / 2.0, scaled_h / 2.0)
        self.player_x = float(width // 2)
        self.player_y = self.terrain_top
        self.player_facing = 1

    def handle_events(self, events: Iterable[pygame.event.Event]) -> bool:
        """Return to the menu when closing is requested; report whether it was."""
        requested = False
        for event in events:
            if event.type == pygame.QUIT:
                self.context.state = GameState.MENU
                requested = True
        return requested

    def update(self, left_pressed: bool, right_pressed: bool, escape_pressed: bool, focused: bool) -> GameState:
        """Scroll the view and move the player; return the game state."""
        if not focused:
            return self.context.state
        if escape_pressed:
            self.context.state = GameState.MENU
            return self.context.state

        left_max = 0.5 * self.view_size[0]
        right_max = self.grid_size_x - 0.5 * self.view_size[0]
        cx, cy = self.view_center

        if left_pressed:
            if cx - left_max > 0:
                cx -= VIEW_STEP
                self.view_center = (cx, cy)
                if self.player_x > cx - left_max:
                    self.player_facing = -1
                    self.player_x -= PLAYER_STEP
        elif right_pressed and cx + right_max < self.window.get_width():
            cx += VIEW_STEP
            self.view_center = (cx, cy)
            if self.player_x < cx + left_max:
                self.player_facing = 1
                self.player_x += PLAYER_STEP
        return self.context.state

    def _player_top_left(self) -> tuple[float, float]:
        ox, oy = self.player_origin
        top = self.player_y - oy * PLAYER_SCALE
        if self.player_facing >= 0:
            return (self.player_x - ox * PLAYER_SCALE, top)
        return (self.player_x + ox * PLAYER_SCALE - self.player_size[0], top)

    def render(self) -> bool:
        """Draw the world through the view when gameplay is active."""
        if self.context.state is not GameState.SP_GAMEPLAY:
            return False
        view_w, view_h = self.view_size
        left = self.view_center[0] - view_w / 2
        top = self.view_center[1] - view_h / 2
        view = pygame.Surface((round(view_w), round(view_h)))
        view.fill(SKY_COLOR)
        view.blit(self.background, (self.background_pos[0] - left, self.background_pos[1] - top))

        for y, block in terrain_rows(self.grid_size_y, self.window.get_height(), self.terrain_height):
            tile = self.blocks[block]
            for x in range(self.grid_size_x):
                view.blit(tile, (x * GRID_CELL - left, y * GRID_CELL - top))

        image = self.player_image
        if self.player_facing < 0:
            image = pygame.transform.flip(image, True, False)
        px, py = self._player_top_left()
        view.blit(image, (px - left, py - top))

        self.window.blit(pygame.transform.scale(view, self.window.get_size()), (0, 0))
        if pygame.display.get_init() and pygame.display.get_surface() is self.window:
            pygame.display.flip()
        return True

    def run(self) -> float:
        """Run one frame of gameplay; return the seconds it took."""
        if pygame.display.get_init():
            self.handle_events(pygame.event.get())
            keys = pygame.key.get_pressed()
            left = bool(keys[pygame.K_a])
            right = bool(keys[pygame.K_d])
            escape = bool(keys[pygame.K_ESCAPE])
            focused = bool(pygame.key.get_focused())
        else:
            left = right = escape = focused = False
        self.update(left, right, escape, focused)
        self.render()
        return super().run()