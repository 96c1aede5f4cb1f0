"""Shared enumerations and the mutable context the screens switch on."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class MenuWidget(Enum):
    """Widgets of the title menu, in the order they are laid out."""

    TITLE = 1
    SUBTITLE = 2
    SINGLEPLAYER = 3
    MULTIPLAYER = 4
    SETTINGS = 5
    QUIT = 6


class GameState(Enum):
    """The screen the main loop is currently showing."""

    MENU = auto()
    LOADING = auto()
    SP_GAMEPLAY = auto()
    MP_GAMEPLAY = auto()
    SETTINGS = auto()
    QUIT = auto()


class LoadState(Enum):
    """Whether the loading screen has been allowed to start."""

    TRUE = auto()
    FALSE = auto()


@dataclass
class GameContext:
    """State shared by every screen; a screen changes it to hand over control."""

    state: GameState = GameState.MENU
    load: LoadState = LoadState.FALSE