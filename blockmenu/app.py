"""Command-line entry point: opens the window and runs the screen loop."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence

import pygame

from blockmenu.engine import AssetError
from blockmenu.game import GameScreen
from blockmenu.loading import LoadScreen
from blockmenu.menu import MainScreen
from blockmenu.state import GameContext, GameState

WINDOW_SIZE = (960, 540)
WINDOW_TITLE = "Minecraft"


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="blockmenu",
        description="Title menu, loading screen and a small block world.",
    )
    parser.add_argument("--assets", default="assets", help="directory holding the game's assets")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random choices")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game until a screen asks to quit; return the exit status."""
    args = build_parser().parse_args(argv)
    pygame.init()
    try:
        window = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        context = GameContext()
        rng = random.Random(args.seed)
        try:
            screens = {
                GameState.MENU: MainScreen(window, context, args.assets, rng),
                GameState.LOADING: LoadScreen(window, context, args.assets),
                GameState.SP_GAMEPLAY: GameScreen(window, context, args.assets, rng),
            }
        except AssetError as exc:
            print(f"blockmenu: {exc}", file=sys.stderr)
            return 1
        while (screen := screens.get(context.state)) is not None:
            screen.run()
        return 0
    finally:
        pygame.quit()