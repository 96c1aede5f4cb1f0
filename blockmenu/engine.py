"""Assets and layout shared by every screen of the game."""

from __future__ import annotations

from pathlib import Path

import pygame

ICON_PATH = Path("images") / "icon_app.jpeg"
CLICK_SOUND_PATH = Path("sounds") / "effects" / "click.mp3"
BUTTON_PATH = Path("images") / "button.jpg"
REGULAR_FONT_PATH = Path("fonts") / "regular.otf"
TITLE_FONT_PATH = Path("fonts") / "title1.ttf"
TITLE_PATH = Path("images") / "title.png"
EDITION_PATH = Path("images") / "edition_copyright.png"

FRAME_RATE = 60
GRID_CELL = 16
BUTTON_HOVER_COLOR = (116, 164, 214)
TITLE_SCALE = 0.3
TITLE_TOP = 60.0

GAME_VERSION = "Minecraft 1.20.1"
GAME_DISCLAIMER = "Not Mojang AB. Can distribute!"


class AssetError(Exception):
    """An asset file is missing or cannot be decoded."""

    def __init__(self, path: str | Path, reason: str = "file not found") -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot load asset {self.path}: {reason}")


class Engine:
    """Base of every screen: loads the shared assets and lays out the title.

    ``window`` is the surface the screens draw on; asset paths are resolved
    under ``asset_root``.
    """

    game_version = GAME_VERSION
    game_disclaimer = GAME_DISCLAIMER

    def __init__(self, window: pygame.Surface, asset_root: str | Path = "assets") -> None:
        self.window = window
        self.asset_root = Path(asset_root)
        self.frame_rate = FRAME_RATE
        self.clock = pygame.time.Clock()

        # Only the shared assets here; subclasses load their own afterwards.
        Engine.load(self)

        if pygame.display.get_init():
            pygame.display.set_icon(self.icon)

        self.buttons_hover_color = pygame.Color(*BUTTON_HOVER_COLOR)
        self.cursor_hand = pygame.SYSTEM_CURSOR_HAND
        self.cursor_default = pygame.SYSTEM_CURSOR_ARROW

        width, height = window.get_size()

        raw_w, raw_h = self.title_texture.get_size()
        self.title_size = (raw_w * TITLE_SCALE, raw_h * TITLE_SCALE)
        self.title_image = pygame.transform.scale(
            self.title_texture,
            (max(1, round(self.title_size[0])), max(1, round(self.title_size[1]))),
        )
        self.title_pos = (width // 2 - self.title_size[0] / 2, TITLE_TOP)

        self.edition_image = self.edition_texture
        ed_w, ed_h = self.edition_image.get_size()
        self.edition_size = (float(ed_w), float(ed_h))
        title_x = self.title_pos[0]
        # The vertical offset is derived from the title's x, as the layout has always done.
        self.edition_pos = (
            title_x + self.title_size[0] / 2 - ed_w / 2,
            title_x + self.title_size[1] / 2 - ed_w / 2.4,
        )

        self.grid_size_x = width // GRID_CELL
        self.grid_size_y = height // GRID_CELL

        self.mouse_absolute: tuple[int, int] = (0, 0)
        self.mouse_relative: tuple[float, float] = (0.0, 0.0)

    def _asset_path(self, relative: Path) -> Path:
        path = self.asset_root / relative
        if not path.is_file():
            raise AssetError(path)
        return path

    def _image(self, relative: Path) -> pygame.Surface:
        path = self._asset_path(relative)
        try:
            return pygame.image.load(str(path))
        except pygame.error as exc:
            raise AssetError(path, str(exc)) from exc

    def _sound(self, relative: Path) -> pygame.mixer.Sound | None:
        path = self._asset_path(relative)
        if not pygame.mixer.get_init():
            return None
        try:
            return pygame.mixer.Sound(str(path))
        except pygame.error as exc:
            raise AssetError(path, str(exc)) from exc

    def load(self) -> None:
        """Load the shared assets, raising AssetError on the first failure."""
        self.icon = self._image(ICON_PATH)
        self.click_sound = self._sound(CLICK_SOUND_PATH)
        self.button_texture = self._image(BUTTON_PATH)
        self.regular_font_path = self._asset_path(REGULAR_FONT_PATH)
        self.title_font_path = self._asset_path(TITLE_FONT_PATH)
        self.title_texture = self._image(TITLE_PATH)
        self.edition_texture = self._image(EDITION_PATH)

    def update_mouse(self, position: tuple[int, int]) -> tuple[float, float]:
        """Record the mouse position and refresh the grid size.

        Returns the position in world coordinates of the default view.
        """
        x, y = position
        self.mouse_absolute = (int(x), int(y))
        self.mouse_relative = (float(x), float(y))
        width, height = self.window.get_size()
        self.grid_size_x = width // GRID_CELL
        self.grid_size_y = height // GRID_CELL
        return self.mouse_relative

    def run(self) -> float:
        """Wait for the next frame at the frame-rate limit.

        Returns the seconds elapsed since the previous frame.
        """
        return self.clock.tick(self.frame_rate) / 1000.0