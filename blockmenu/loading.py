"""The loading screen shown between the title menu and the block world."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Iterable

import pygame

from blockmenu.engine import AssetError, Engine
from blockmenu.randomizer import open_web
from blockmenu.state import GameContext, GameState

LOADING_BACKGROUND_PATH = Path("images") / "backgrounds" / "loading_singleplayer.png"

TOTAL_LOAD_TIME = 4.5
BAR_SIZE = (500.0, 15.0)
PROCESS_HEIGHT = 13.0
BAR_COLOR = (161, 161, 161)
PROCESS_COLOR = (0, 222, 15)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
STATUS_TEXT_SIZE = 18
STATUS_OFFSET = 25.0

CLOSE_URL = "https://example.com/"

INITIAL_STATUS = "..."
STATUS_GENERATING = "Generating Terrain..."
STATUS_PREPARING = "Preparing Level..."
STATUS_SYNTHESIZING = "Synthesizing World..."
STATUS_DONE = "Loading Overworld"

GENERATING_LIMIT = 50.0
PREPARING_LIMIT = 300.0
SYNTHESIZING_LIMIT = 420.0
DONE_WIDTH = 500.0


class LoadProgress:
    """Fills the progress bar over ``total_time`` seconds and names the stage."""

    def __init__(self, total_time: float = TOTAL_LOAD_TIME, bar_width: float = BAR_SIZE[0]) -> None:
        if total_time <= 0:
            raise ValueError("total_time must be positive")
        self.total_time = float(total_time)
        self.bar_width = float(bar_width)
        self.current_time = 0.0
        self.width = 0.0
        self.status = INITIAL_STATUS

    def advance(self, elapsed: float) -> bool:
        """Add ``elapsed`` seconds; return True once the bar has filled.

        On completion the bar is emptied again, while the elapsed time is kept.
        """
        if elapsed < 0:
            raise ValueError("elapsed time cannot be negative")
        self.current_time += elapsed
        progress = min(self.current_time / self.total_time, 1.0)
        self.width = self.bar_width * progress

        if self.width <= GENERATING_LIMIT:
            self.status = STATUS_GENERATING
        elif self.width <= PREPARING_LIMIT:
            self.status = STATUS_PREPARING
        elif self.width <= SYNTHESIZING_LIMIT:
            self.status = STATUS_SYNTHESIZING
        elif self.width >= DONE_WIDTH:
            self.status = STATUS_DONE
            self.width = 0.0
            return True
        return False

    def reset(self) -> None:
        """Start over with an empty bar."""
        self.current_time = 0.0
        self.width = 0.0
        self.status = INITIAL_STATUS


def _outlined(font: pygame.font.Font, text: str, color: tuple[int, ...]) -> pygame.Surface:
    base = font.render(text, True, color)
    shadow = font.render(text, True, BLACK)
    width, height = base.get_size()
    surface = pygame.Surface((width + 2, height + 2), pygame.SRCALPHA)
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx or dy:
                surface.blit(shadow, (1 + dx, 1 + dy))
    surface.blit(base, (1, 1))
    return surface


class LoadScreen(Engine):
    """Shows the world being prepared, then hands over to the gameplay screen."""

    def __init__(
        self,
        window: pygame.Surface,
        context: GameContext,
        asset_root: str | Path = "assets",
    ) -> None:
        super().__init__(window, asset_root)
        self.context = context
        self.close_url = CLOSE_URL

        texture = self._image(LOADING_BACKGROUND_PATH)
        width, height = window.get_size()
        self.background = pygame.transform.scale(texture, (width, height))

        bar_w, bar_h = BAR_SIZE
        self.bar_rect = pygame.Rect(round(width // 2 - bar_w / 2), height // 2, round(bar_w), round(bar_h))
        self.process_pos = (self.bar_rect.x + 1.0, self.bar_rect.y + 1.0)
        self.progress = LoadProgress(TOTAL_LOAD_TIME, bar_w)

        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self.font = pygame.font.Font(str(self.regular_font_path), STATUS_TEXT_SIZE)
        except (pygame.error, OSError) as exc:
            raise AssetError(self.regular_font_path, str(exc)) from exc
        text_w, _ = self.font.size(self.progress.status)
        # Horizontal placement follows the bar's width, not its position.
        self.status_pos = (bar_w / 2 - text_w / 2, self.bar_rect.y - STATUS_OFFSET)

        self.cursor = self.cursor_default
        self._last_tick = time.perf_counter()

    def _set_cursor(self, cursor: int) -> None:
        self.cursor = cursor
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            try:
                pygame.mouse.set_cursor(cursor)
            except pygame.error:
                pass

    def handle_events(self, events: Iterable[pygame.event.Event]) -> bool:
        """Open the project page when closing is requested; report whether it was."""
        requested = False
        for event in events:
            if event.type == pygame.QUIT:
                open_web(self.close_url)
                requested = True
        return requested

    def update(self, elapsed: float) -> GameState:
        """Advance the bar by ``elapsed`` seconds; return the game state."""
        self._set_cursor(self.cursor_default)
        if self.progress.advance(elapsed):
            self.context.state = GameState.SP_GAMEPLAY
        return self.context.state

    def render(self) -> bool:
        """Draw the screen when it is the active one; return whether it drew."""
        if self.context.state is not GameState.LOADING:
            return False
        window = self.window
        window.fill(BLACK)
        window.blit(self.background, (0, 0))
        window.blit(self.title_image, self.title_pos)
        window.blit(self.edition_image, self.edition_pos)
        window.blit(_outlined(self.font, self.progress.status, WHITE), self.status_pos)
        pygame.draw.rect(window, BAR_COLOR, self.bar_rect)
        process_w = round(self.progress.width)
        if process_w > 0:
            pygame.draw.rect(
                window,
                PROCESS_COLOR,
                pygame.Rect(round(self.process_pos[0]), round(self.process_pos[1]), process_w, round(PROCESS_HEIGHT)),
            )
        if pygame.display.get_init() and pygame.display.get_surface() is window:
            pygame.display.flip()
        return True

    def run(self) -> float:
        """Run one frame of the loading screen; return the seconds it advanced."""
        if pygame.display.get_init():
            self.handle_events(pygame.event.get())
        now = time.perf_counter()
        elapsed = now - self._last_tick
        self._last_tick = now
        self.update(elapsed)
        self.render()
        super().run()
        return elapsed