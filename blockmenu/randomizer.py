"""Random splash messages and title backgrounds, and a browser launcher."""

from __future__ import annotations

import random
import subprocess
import sys
from pathlib import Path

import pygame


def _parse(block: str) -> tuple[str, ...]:
    """Split a block of ``|``-separated messages into a tuple."""
    return tuple(
        item.strip()
        for line in block.strip().splitlines()
        for item in line.split("|")
        if item.strip()
    )


_OPENING = _parse(
    """
    Craft, Explore, Survive! | Unleash Your Creativity! | New Adventures Await!
    Block-Building Fun Awaits! | Discover Endless Worlds! | Mine, Craft, Repeat!
    Forge Your Own Path! | Build Your Dream World! | Enter the Pixelated Realm!
    Embark on Epic Quests! | Crafting Awaits Your Command! | Adventure Awaits, Miner!
    Crafting and Building Galore! | Dive into Blocky Wonders!
    Survive and Thrive in Minecraft! | Un-Limitless Possibilities!
    Build Your Imagination! | Construct Your Fantasy World! | Explore, Create, Conquer!
    Brave the Blocks and Build! | Begin Your Minecraft Journey! | Snapshot, Smile!
    Mine Your Way to Glory! | Crafting Your World, One Block at a Time!
    Adventure Beyond the Horizon! | Infinite Creativity in Every Block!
    Build, Survive, Thrive! | Unearth the Secrets of Minecraft!
    A World of Blocks Awaits Your Touch! | Craft Your Legacy! | Every Block Tells a Story!
    Master the Art of Mining and Crafting! | Dream, Build, Explore!
    Your Imagination, Your World! | Mine Deep, Build High! | The Adventure Begins Here!
    A World to Create, A World to Explore! | Minecraft: Where Blocks Come to Life!
    Crafting, Mining, and More! | Uncover the Mysteries of Minecraft!
    Block by Block, You Shape the World! | Craft Your Destiny!
    Adventure Beyond the Horizon! | The World of Blocks Awaits! | Dig Deep, Dream Big!
    Build the Impossible! | Crafting Your Dreams into Reality!
    Mine Your Way to Greatness! | Infinite Adventures Await!
    Minecraft: The Ultimate Sandbox! | Creativity Unleashed!
    Explore the Endless Possibilities! | Master the Craft of Building!
    Adventure Awaits in Every Block! | Build, Survive, Thrive! | Unleash Your Inner Builder!
    Craft Your World, One Block at a Time! | Mine, Create, Discover!
    Embark on an Epic Journey! | Where Imagination Meets Creation!
    The Adventure Begins Here! | Crafting Dreams into Reality!
    A World of Blocks, Yours to Explore! | Create Your Legacy in Minecraft!
    Mining, Crafting, and Beyond! | Unlock the Secrets of Minecraft!
    Shape Your World, Block by Block! | Craft Your Own Path! | Building Adventures Await!
    Unearth the Wonders of Minecraft! | Every Block Tells a Tale!
    Minecraft: Where Blocks Come Alive! | Crafting, Mining, and More!
    Discover the Magic of Minecraft! | Build Your Dreams!
    """
)

# A run of messages that the list repeats three times; the first run
# differs from the later two in a handful of places.
_CYCLE = _parse(
    """
    Adventure Beyond Imagination! | The World of Blocks Awaits Your Touch!
    Dig Deep, Build Tall! | Crafting the Future! | Dream, Build, Explore!
    Create Your Reality, One Block at a Time! | Mine Deep, Dream High!
    Craft Your Destiny! | Endless Adventures Await! | Minecraft: Your World, Your Rules!
    Crafting Creations into Existence! | Uncover the Wonders of Minecraft!
    Block by Block, You Shape Your World! | Craft Your Own Adventure!
    Adventure Awaits Beyond the Horizon! | Explore, Build, Thrive!
    Unleash Your Inner Architect! | Discover Endless Possibilities!
    Master the Art of Building! | The World of Blocks Beckons!
    Build, Survive, Flourish! | Unleash Your Creativity!
    Mining and Crafting: Your Path to Greatness!
    Enter a World of Blocks and Imagination! | Craft Your World, Block by Block!
    Mine, Create, Conquer! | Embark on an Epic Journey!
    Where Imagination Meets Reality! | The Adventure Awaits You!
    Crafting Dreams into Reality! | A Universe of Blocks Awaits Exploration!
    Forge Your Path to Greatness! | Building Marvels Await!
    Discover the Wonders of Minecraft! | Unlock Secrets, One Block at a Time!
    Shape Your World, Block by Block! | Crafting a Brighter Future!
    Dream, Build, Conquer! | Create Your Legacy in Minecraft!
    Crafting: Your Journey Awaits! | Mining, Crafting, Thriving!
    The World of Blocks, Yours to Explore! | Crafting Adventures Begin!
    Unearth Hidden Treasures! | Every Block Holds a Story!
    Minecraft: Blocks Brought to Life! | Crafting, Mining, Exploring!
    Discover the Marvels of Minecraft! | Build Your Dreams, One Block at a Time!
    """
)

_FIRST_CYCLE_CHANGES = {
    9: "Minecraft: Your World, Your Way!",
    11: "Uncover the Marvels of Minecraft!",
    20: "Build, Survive, and Flourish!",
    24: "Craft Your World with Every Block!",
}

_FIRST_CYCLE = tuple(
    _FIRST_CYCLE_CHANGES.get(position, message)
    for position, message in enumerate(_CYCLE)
)

SPLASH_MESSAGES: tuple[str, ...] = _OPENING + _FIRST_CYCLE + _CYCLE * 2

BACKGROUND_DIR = Path("images") / "backgrounds"

BACKGROUND_FILES: tuple[str, ...] = tuple(
    f"mainScreen_{index}.{extension}"
    for index, extension in enumerate(
        ("jpg", "jpeg", "png", "jpeg", "jpeg", "jpeg", "jpeg", "jpeg")
    )
)


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_splash_message(rng: random.Random | None = None) -> str:
    """Pick one of the title-screen splash messages."""
    return _rng_or_default(rng).choice(SPLASH_MESSAGES)


def random_background_path(
    asset_root: str | Path = "assets", rng: random.Random | None = None
) -> Path:
    """Pick the path of one of the title-screen backgrounds under ``asset_root``."""
    name = _rng_or_default(rng).choice(BACKGROUND_FILES)
    return Path(asset_root) / BACKGROUND_DIR / name


def load_main_background(
    asset_root: str | Path = "assets", rng: random.Random | None = None
) -> pygame.Surface:
    """Load a randomly chosen title-screen background image.

    Raises FileNotFoundError when the chosen image is missing.
    """
    path = random_background_path(asset_root, rng)
    if not path.is_file():
        raise FileNotFoundError(f"background image not found: {path}")
    return pygame.image.load(str(path))


def open_web(url: str) -> bool:
    """Open ``url`` in the desktop's default browser.

    Returns False on platforms with no known launcher.
    """
    platform = sys.platform
    if platform.startswith("win"):
        command = ["cmd", "/c", "start", "", url]
    elif platform == "darwin":
        command = ["open", url]
    elif platform.startswith("linux"):
        command = ["xdg-open", url]
    else:
        return False
    subprocess.Popen(command)
    return True