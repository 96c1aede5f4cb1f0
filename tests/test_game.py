import random
import shutil
from pathlib import Path

import pygame
import pytest

from blockmenu.engine import AssetError
from blockmenu.game import Block, GameScreen, random_terrain_height, terrain_rows
from blockmenu.state import GameContext, GameState


def _write_image(path: Path, size, color=(90, 90, 90)):
    path.parent.mkdir(parents=True, exist_ok=True)
    surface = pygame.Surface(size)
    surface.fill(color)
    temp = path.with_name(path.name + ".tmp.png")
    pygame.image.save(surface, str(temp))
    temp.replace(path)


def _make_assets(root: Path, skip=()):
    images = {
        "images/icon_app.jpeg": (32, 32),
        "images/button.jpg": (200, 20),
        "images/title.png": (100, 50),
        "images/edition_copyright.png": (20, 10),
        "images/backgrounds/SM_Background.png": (64, 36),
        "images/atlas/texture_atlas.png": (80, 16),
        "images/atlas/steve_atlas.png": (50, 240),
    }
    for name, size in images.items():
        if name not in skip:
            _write_image(root / name, size)
    sound = root / "sounds" / "effects" / "click.mp3"
    sound.parent.mkdir(parents=True, exist_ok=True)
    sound.write_bytes(b"")
    font_src = Path(pygame.__file__).parent / pygame.font.get_default_font()
    fonts = root / "fonts"
    fonts.mkdir(parents=True, exist_ok=True)
    shutil.copy(font_src, fonts / "regular.otf")
    shutil.copy(font_src, fonts / "title1.ttf")
    return root


@pytest.fixture
def screen(tmp_path):
    root = _make_assets(tmp_path / "assets")
    context = GameContext(state=GameState.SP_GAMEPLAY)
    return GameScreen(pygame.Surface((960, 540)), context, root, random.Random(1))


@pytest.mark.parametrize("seed", range(10))
def test_terrain_height_in_range(seed):
    height = random_terrain_height(random.Random(seed))
    assert 200.0 <= height <= 270.0


def test_terrain_height_repeatable_with_seed_and_varies_across_seeds():
    height = random_terrain_height(random.Random(3))
    assert 200.0 <= height <= 270.0
    assert random_terrain_height(random.Random(3)) == height
    heights = {random_terrain_height(random.Random(seed)) for seed in range(20)}
    assert len(heights) > 1


def test_terrain_rows_only_bedrock_without_terrain():
    assert terrain_rows(33, 540, 540.0) == [(32, Block.BEDROCK)]


def test_terrain_rows_empty_grid():
    assert terrain_rows(0, 540, 236.0) == []


@pytest.mark.parametrize("height", [200.0, 236.5, 270.0])
def test_terrain_rows_shape(height):
    rows = terrain_rows(33, 540, height)
    ys = [y for y, _ in rows]
    assert rows[-1] == (32, Block.BEDROCK)
    assert all(block is Block.STONE for _, block in rows[:-1])
    assert ys == list(range(ys[0], ys[0] + len(ys)))


def test_terrain_rows_grow_with_lower_terrain():
    assert len(terrain_rows(33, 540, 200.0)) >= len(terrain_rows(33, 540, 270.0))


def test_escape_returns_to_menu(screen):
    assert screen.update(False, False, True, True) is GameState.MENU
    assert screen.context.state is GameState.MENU


def test_unfocused_ignores_input(screen):
    start = screen.view_center
    assert screen.update(True, False, True, False) is GameState.SP_GAMEPLAY
    assert screen.view_center == start


def test_left_scrolls_and_turns_player(screen):
    start_view = screen.view_center
    start_player = screen.player_x
    screen.update(True, False, False, True)
    assert screen.view_center[0] == start_view[0] - 2.0
    assert screen.player_x < start_player
    assert screen.player_facing == -1


def test_right_scrolls_and_faces_right(screen):
    screen.update(True, False, False, True)
    start_view = screen.view_center
    start_player = screen.player_x
    screen.update(False, True, False, True)
    assert screen.view_center[0] == start_view[0] + 2.0
    assert screen.player_x > start_player
    assert screen.player_facing == 1


def test_close_event_returns_to_menu(screen):
    assert screen.handle_events([pygame.event.Event(pygame.QUIT)]) is True
    assert screen.context.state is GameState.MENU


def test_render_only_in_gameplay(screen):
    assert screen.render() is True
    screen.context.state = GameState.MENU
    assert screen.render() is False


def test_missing_atlas_raises(tmp_path):
    root = _make_assets(tmp_path / "assets", skip={"images/atlas/texture_atlas.png"})
    with pytest.raises(AssetError):
        GameScreen(pygame.Surface((960, 540)), GameContext(), root, random.Random(0))