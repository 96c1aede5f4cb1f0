import random
import shutil
from pathlib import Path

import pygame
import pytest

from blockmenu.engine import AssetError
from blockmenu.menu import MainScreen, SplashPulse
from blockmenu.randomizer import BACKGROUND_FILES, SPLASH_MESSAGES
from blockmenu.state import GameContext, GameState, MenuWidget

BUTTON_SIZE = (200, 20)


@pytest.fixture
def asset_root(tmp_path):
    pygame.font.init()
    scratch = tmp_path / "scratch.png"

    def image(relative, size):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        surface = pygame.Surface(size)
        surface.fill((90, 120, 60))
        pygame.image.save(surface, str(scratch))
        path.write_bytes(scratch.read_bytes())

    image("images/icon_app.jpeg", (32, 32))
    image("images/button.jpg", BUTTON_SIZE)
    image("images/title.png", (1000, 200))
    image("images/edition_copyright.png", (100, 14))
    for name in BACKGROUND_FILES:
        image(f"images/backgrounds/{name}", (64, 36))

    sounds = tmp_path / "sounds" / "effects"
    sounds.mkdir(parents=True)
    (sounds / "click.mp3").write_bytes(b"\x00")

    fonts = tmp_path / "fonts"
    fonts.mkdir()
    default_font = Path(pygame.__file__).parent / pygame.font.get_default_font()
    shutil.copy(default_font, fonts / "regular.otf")
    shutil.copy(default_font, fonts / "title1.ttf")
    return tmp_path


@pytest.fixture
def context():
    return GameContext()


@pytest.fixture
def screen(asset_root, context):
    window = pygame.Surface((960, 540))
    return MainScreen(window, context, asset_root, random.Random(1))


def centre(screen, widget):
    x, y = screen.buttons[widget].bounds.center
    return (int(x), int(y))


def test_pulse_starts_growing():
    pulse = SplashPulse()
    first = pulse.step()
    assert first > 1.0
    assert pulse.increasing is True


def test_pulse_stays_between_limits_and_turns_back():
    pulse = SplashPulse(0.05)
    scales = [pulse.step() for _ in range(2000)]
    assert max(scales) < 1.3
    assert min(scales) > 0.95
    peak = scales.index(max(scales))
    assert scales[peak + 1] < scales[peak]


def test_pulse_with_zero_speed_does_not_move():
    pulse = SplashPulse(0.0)
    assert [pulse.step() for _ in range(5)] == [1.0] * 5


def test_splash_message_is_one_of_the_known_messages(screen):
    assert screen.splash_message in SPLASH_MESSAGES


def test_button_layout(screen):
    single = screen.buttons[MenuWidget.SINGLEPLAYER].bounds
    multi = screen.buttons[MenuWidget.MULTIPLAYER].bounds
    settings = screen.buttons[MenuWidget.SETTINGS].bounds
    quit_bounds = screen.buttons[MenuWidget.QUIT].bounds
    assert single.width == pytest.approx(BUTTON_SIZE[0] * 1.2)
    assert multi.y == pytest.approx(single.bottom + 6.0)
    assert settings.y == pytest.approx(multi.bottom + 27.0)
    assert quit_bounds.y == pytest.approx(settings.y)
    assert quit_bounds.x == pytest.approx(settings.right + 9.5)
    assert settings.x == pytest.approx(single.x)


def test_labels_are_centred_on_their_buttons(screen):
    for button in screen.buttons.values():
        label_centre = button.label_pos[0] + button.label_size[0] / 2
        assert label_centre == pytest.approx(button.bounds.center[0])


def test_info_texts_sit_at_the_bottom(screen):
    assert screen.version_pos == (8.0, 540.0 - 15 - 5)
    assert screen.copyright_pos[0] + screen.copyright_text.get_width() + 8 == pytest.approx(960)


def test_click_singleplayer_starts_loading(screen, context):
    state = screen.user_events(centre(screen, MenuWidget.SINGLEPLAYER), True, False, True)
    assert state is GameState.LOADING
    assert context.state is GameState.LOADING


def test_hover_highlights_without_changing_state(screen, context):
    screen.user_events(centre(screen, MenuWidget.SINGLEPLAYER), False, False, True)
    assert context.state is GameState.MENU
    assert screen.buttons[MenuWidget.SINGLEPLAYER].hovered is True
    assert screen.cursor == screen.cursor_hand


def test_click_quit_requests_quit(screen, context):
    screen.user_events(centre(screen, MenuWidget.QUIT), True, False, True)
    assert context.state is GameState.QUIT


def test_click_settings_keeps_menu(screen, context):
    screen.user_events(centre(screen, MenuWidget.SETTINGS), True, False, True)
    assert context.state is GameState.MENU
    assert screen.buttons[MenuWidget.SETTINGS].hovered is True


def test_moving_away_clears_highlight(screen):
    screen.user_events(centre(screen, MenuWidget.QUIT), False, False, True)
    screen.user_events((1, 1), False, False, True)
    assert screen.buttons[MenuWidget.QUIT].hovered is False
    assert screen.cursor == screen.cursor_default


def test_escape_with_click_is_ignored(screen, context):
    screen.user_events(centre(screen, MenuWidget.SINGLEPLAYER), True, True, True)
    assert context.state is GameState.MENU
    assert screen.buttons[MenuWidget.SINGLEPLAYER].hovered is False


def test_unfocused_window_ignores_mouse(screen, context):
    screen.user_events(centre(screen, MenuWidget.QUIT), True, False, False)
    assert context.state is GameState.MENU
    assert screen.buttons[MenuWidget.QUIT].hovered is False


def test_clicks_ignored_outside_menu_state(screen, context):
    context.state = GameState.SP_GAMEPLAY
    screen.user_events(centre(screen, MenuWidget.QUIT), True, False, True)
    assert context.state is GameState.SP_GAMEPLAY


def test_render_only_in_menu_state(screen, context):
    assert screen.render() is True
    context.state = GameState.LOADING
    assert screen.render() is False


def test_handle_events_reports_close_without_changing_state(screen, context):
    assert screen.handle_events([pygame.event.Event(pygame.QUIT)]) is True
    assert screen.handle_events([]) is False
    assert context.state is GameState.MENU


def test_missing_font_raises_asset_error(asset_root, context):
    (asset_root / "fonts" / "regular.otf").unlink()
    with pytest.raises(AssetError):
        MainScreen(pygame.Surface((960, 540)), context, asset_root, random.Random(2))


def test_missing_backgrounds_raise_asset_error(asset_root, context):
    shutil.rmtree(asset_root / "images" / "backgrounds")
    with pytest.raises(AssetError):
        MainScreen(pygame.Surface((960, 540)), context, asset_root, random.Random(3))


def test_run_headless_keeps_state_and_reports_time(screen, context):
    elapsed = screen.run()
    assert elapsed >= 0.0
    assert context.state is GameState.MENU