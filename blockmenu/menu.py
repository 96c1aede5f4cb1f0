"""The title screen: background, splash message and the main menu buttons."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

import pygame

from blockmenu.engine import AssetError, Engine
from blockmenu.randomizer import BACKGROUND_DIR, load_main_background, random_splash_message
from blockmenu.state import GameContext, GameState, MenuWidget

SINGLEPLAYER_TEXT = "Singleplayer"
MULTIPLAYER_TEXT = "Multiplayer"
OPTIONS_TEXT = "Options..."
QUIT_TEXT = "Quit game"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
LABEL_HOVER_COLOR = (254, 255, 169)
SPLASH_COLOR = (213, 222, 82)
CLEAR_COLOR = (255, 255, 255, 20)

WIDE_BUTTON_SCALE = (1.2, 0.85)
NARROW_BUTTON_SCALE = (0.58, 0.85)

INFO_TEXT_SIZE = 15
SPLASH_TEXT_SIZE = 30
SINGLEPLAYER_TEXT_SIZE = 18
BUTTON_TEXT_SIZE = 15
SPLASH_ROTATION = 20.0
SPLASH_SPEED = 0.005
SPLASH_MAX_SCALE = 1.25
SPLASH_MIN_SCALE = 1.0


class SplashPulse:
    """Grows and shrinks the splash message between its scale limits."""

    def __init__(self, speed: float = SPLASH_SPEED) -> None:
        self.speed = speed
        self.scale = 1.0
        self.increasing = True

    def step(self) -> float:
        """Advance one frame and return the new scale."""
        delta = self.speed * 0.3
        self.scale *= 1 + delta if self.increasing else 1 - delta
        if self.scale > SPLASH_MAX_SCALE or self.scale < SPLASH_MIN_SCALE:
            self.increasing = not self.increasing
        return self.scale


@dataclass(frozen=True)
class _Bounds:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, point: tuple[float, float]) -> bool:
        px, py = point
        return self.x <= px < self.right and self.y <= py < self.bottom


@dataclass
class _Button:
    bounds: _Bounds
    image: pygame.Surface
    text: str
    font: pygame.font.Font
    label_pos: tuple[float, float] = (0.0, 0.0)
    label_size: tuple[int, int] = (0, 0)
    hovered: bool = field(default=False)


def _render_text(
    font: pygame.font.Font, text: str, color: tuple[int, ...], outline: int = 0
) -> pygame.Surface:
    base = font.render(text, True, color)
    if outline <= 0:
        return base
    width, height = base.get_size()
    surface = pygame.Surface((width + 2 * outline, height + 2 * outline), pygame.SRCALPHA)
    shadow = font.render(text, True, BLACK)
    for dx in (-outline, 0, outline):
        for dy in (-outline, 0, outline):
            if dx or dy:
                surface.blit(shadow, (outline + dx, outline + dy))
    surface.blit(base, (outline, outline))
    return surface


class MainScreen(Engine):
    """Title menu; clicking a button changes the shared game state."""

    def __init__(
        self,
        window: pygame.Surface,
        context: GameContext,
        asset_root: str | Path = "assets",
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(window, asset_root)
        self.context = context
        if not pygame.font.get_init():
            pygame.font.init()
        self._fonts: dict[int, pygame.font.Font] = {}

        try:
            texture = load_main_background(self.asset_root, rng)
        except (FileNotFoundError, pygame.error) as exc:
            raise AssetError(self.asset_root / BACKGROUND_DIR, str(exc)) from exc
        width, height = window.get_size()
        self.background = pygame.transform.scale(texture, (width, height))

        self.buttons = self._layout_buttons()

        info_font = self._font(INFO_TEXT_SIZE)
        self.version_text = info_font.render(self.game_version, True, WHITE)
        self.version_pos = (8.0, float(height - INFO_TEXT_SIZE - 5))
        self.copyright_text = info_font.render(self.game_disclaimer, True, WHITE)
        self.copyright_pos = (
            float(width - self.copyright_text.get_width() - 8),
            float(height - INFO_TEXT_SIZE - 5),
        )

        self.splash_message = random_splash_message(rng)
        self.splash_pos = (self.title_size[0] + 20.0, self.title_size[1] + 50.0)
        self.splash = SplashPulse()

        self.cursor = self.cursor_default

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            try:
                self._fonts[size] = pygame.font.Font(str(self.regular_font_path), size)
            except (pygame.error, OSError) as exc:
                raise AssetError(self.regular_font_path, str(exc)) from exc
        return self._fonts[size]

    def _make_button(
        self, x: float, y: float, scale: tuple[float, float], text: str, text_size: int
    ) -> _Button:
        tex_w, tex_h = self.button_texture.get_size()
        width, height = tex_w * scale[0], tex_h * scale[1]
        image = pygame.transform.scale(
            self.button_texture, (max(1, round(width)), max(1, round(height)))
        )
        font = self._font(text_size)
        label_w, label_h = font.size(text)
        label_pos = (x + width / 2 - label_w / 2, y + height / 2 - label_h)
        return _Button(
            bounds=_Bounds(x, y, width, height),
            image=image,
            text=text,
            font=font,
            label_pos=label_pos,
            label_size=(label_w, label_h),
        )

    def _layout_buttons(self) -> dict[MenuWidget, _Button]:
        title_x, title_y = self.title_pos
        title_w, title_h = self.title_size
        tex_w, _ = self.button_texture.get_size()
        centre_x = title_x + title_w / 2
        wide_w = tex_w * WIDE_BUTTON_SCALE[0]

        # The disclaimer is laid out later, so it adds no height here.
        single = self._make_button(
            centre_x - wide_w / 2,
            title_y + title_h + 45.0,
            WIDE_BUTTON_SCALE,
            SINGLEPLAYER_TEXT,
            SINGLEPLAYER_TEXT_SIZE,
        )
        multi = self._make_button(
            centre_x - single.bounds.width / 2,
            single.bounds.bottom + 6.0,
            WIDE_BUTTON_SCALE,
            MULTIPLAYER_TEXT,
            BUTTON_TEXT_SIZE,
        )
        settings = self._make_button(
            centre_x - multi.bounds.width / 2,
            multi.bounds.bottom + 27.0,
            NARROW_BUTTON_SCALE,
            OPTIONS_TEXT,
            BUTTON_TEXT_SIZE,
        )
        quit_button = self._make_button(
            settings.bounds.right + 9.5,
            multi.bounds.bottom + 27.0,
            NARROW_BUTTON_SCALE,
            QUIT_TEXT,
            BUTTON_TEXT_SIZE,
        )
        return {
            MenuWidget.SINGLEPLAYER: single,
            MenuWidget.MULTIPLAYER: multi,
            MenuWidget.SETTINGS: settings,
            MenuWidget.QUIT: quit_button,
        }

    def _set_cursor(self, cursor: int) -> None:
        self.cursor = cursor
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            try:
                pygame.mouse.set_cursor(cursor)
            except pygame.error:
                pass

    def _click_playing(self) -> bool:
        return self.click_sound is not None and self.click_sound.get_num_channels() > 0

    def _click(self) -> bool:
        """Play the click sound unless it is still playing; report whether it played."""
        if self._click_playing():
            return False
        if self.click_sound is not None:
            self.click_sound.play()
        return True

    def handle_events(self, events: Iterable[pygame.event.Event]) -> bool:
        """Drain window events; return whether closing the window was requested.

        The title screen itself ignores the request.
        """
        return any(event.type == pygame.QUIT for event in events)

    def user_events(
        self,
        mouse_pos: tuple[int, int],
        mouse_pressed: bool,
        escape_pressed: bool,
        focused: bool,
    ) -> GameState:
        """Animate the splash and react to the mouse; return the game state."""
        self.splash.step()
        if not focused:
            return self.context.state

        point = self.update_mouse(mouse_pos)
        if self.context.state is not GameState.MENU:
            return self.context.state
        if escape_pressed and mouse_pressed:
            return self.context.state

        actions = {
            MenuWidget.SINGLEPLAYER: GameState.LOADING,
            MenuWidget.SETTINGS: None,
            MenuWidget.QUIT: GameState.QUIT,
        }
        for widget, target in actions.items():
            button = self.buttons[widget]
            if button.bounds.contains(point):
                self._set_cursor(self.cursor_hand)
                button.hovered = True
                if mouse_pressed and self._click() and target is not None:
                    self.context.state = target
                return self.context.state

        for widget in actions:
            self.buttons[widget].hovered = False
        self._set_cursor(self.cursor_default)
        return self.context.state

    def render(self) -> bool:
        """Draw the menu when it is the active screen; return whether it drew."""
        if self.context.state is not GameState.MENU:
            return False
        window = self.window
        window.fill(CLEAR_COLOR)
        window.blit(self.background, (0, 0))
        window.blit(self.version_text, self.version_pos)
        window.blit(self.copyright_text, self.copyright_pos)
        window.blit(self.title_image, self.title_pos)
        window.blit(self.edition_image, self.edition_pos)

        splash = _render_text(
            self._font(SPLASH_TEXT_SIZE), self.splash_message, SPLASH_COLOR, outline=1
        )
        window.blit(
            pygame.transform.rotozoom(splash, SPLASH_ROTATION, self.splash.scale),
            self.splash_pos,
        )

        for button in self.buttons.values():
            image = button.image
            color = WHITE
            if button.hovered:
                image = image.copy()
                image.fill(self.buttons_hover_color, special_flags=pygame.BLEND_RGB_MULT)
                color = LABEL_HOVER_COLOR
            window.blit(image, (button.bounds.x, button.bounds.y))
            window.blit(_render_text(button.font, button.text, color, outline=1), button.label_pos)

        if pygame.display.get_init() and pygame.display.get_surface() is window:
            pygame.display.flip()
        return True

    def run(self) -> float:
        """Run one frame of the title screen; return the seconds it took."""
        if pygame.display.get_init():
            self.handle_events(pygame.event.get())
            mouse_pos = pygame.mouse.get_pos()
            mouse_pressed = bool(pygame.mouse.get_pressed()[0])
            escape_pressed = bool(pygame.key.get_pressed()[pygame.K_ESCAPE])
            focused = bool(pygame.key.get_focused())
        else:
            mouse_pos, mouse_pressed, escape_pressed, focused = (0, 0), False, False, False
        self.user_events(mouse_pos, mouse_pressed, escape_pressed, focused)
        self.render()
        return super().run()