# blockmenu

A small block-world game front end built on pygame. `blockmenu` opens a
960×540 window titled "Minecraft" and moves between three screens, all of
which share one `GameContext` whose `state` decides which screen runs.

## Screens

**Title screen** (`blockmenu.menu.MainScreen`)

- A background chosen at random from eight images, the game title and
  edition images, and the version and disclaimer lines along the bottom.
- A splash message picked at random that slowly grows and shrinks.
- Four buttons: *Singleplayer*, *Multiplayer*, *Options...* and *Quit game*.
- Hovering *Singleplayer*, *Options...* or *Quit game* tints the button,
  colours its label and shows a hand cursor. A click plays the click sound
  (unless it is still playing); *Singleplayer* then switches to the loading
  screen and *Quit game* ends the program. *Options...* only plays the sound.
- Closing the window from this screen is ignored.

**Loading screen** (`blockmenu.loading.LoadScreen`)

- A progress bar that fills over 4.5 seconds. The status line above it reads
  "Generating Terrain...", "Preparing Level...", "Synthesizing World..." and
  finally "Loading Overworld", after which the game screen takes over.
- Closing the window from this screen opens a web page in the default
  browser (`blockmenu.randomizer.open_web`) instead of closing.

**Game screen** (`blockmenu.game.GameScreen`)

- A 540×400 view, scaled up to the window, over a terrain of stone rows of
  random height with a bedrock row at the bottom, and a player sprite.
- `A` and `D` scroll the view and walk the player left and right; `Escape`,
  or closing the window, returns to the title screen.

## Installing

```
pip install .
```

## Running

```
blockmenu
blockmenu --assets path/to/assets --seed 42
```

- `--assets DIR`: directory holding the game's assets (default: `assets` in
  the current directory).
- `--seed N`: seed for the random background, splash message and terrain
  height.

The command exits with status 0 when *Quit game* is chosen. If an asset is
missing or cannot be loaded, it prints which one to standard error and exits
with status 1.

### Assets

These files are read from the assets directory:

```
images/icon_app.jpeg
images/button.jpg
images/title.png
images/edition_copyright.png
images/backgrounds/mainScreen_0.jpg
images/backgrounds/mainScreen_1.jpeg
images/backgrounds/mainScreen_2.png
images/backgrounds/mainScreen_3.jpeg … mainScreen_7.jpeg
images/backgrounds/loading_singleplayer.png
images/backgrounds/SM_Background.png
images/atlas/texture_atlas.png
images/atlas/steve_atlas.png
sounds/effects/click.mp3
fonts/regular.otf
fonts/title1.ttf
```

`fonts/title1.ttf` must exist but is not used for drawing. The click sound
is only loaded when pygame's mixer is available. Only one title background
is needed per run, the one picked at random.

## Using the pieces

Much of the screen logic works without a window:

- `blockmenu.state`: the `GameState`, `LoadState` and `MenuWidget` enums and
  the `GameContext` dataclass (`state`, `load`).
- `blockmenu.randomizer`: `random_splash_message(rng)`,
  `random_background_path(asset_root, rng)`, `load_main_background(asset_root, rng)`
  (raises `FileNotFoundError` when the image is missing) and `open_web(url)`
  (returns `False` on platforms with no known browser launcher). The full
  message list is `SPLASH_MESSAGES`.
- `blockmenu.menu.SplashPulse`: `step()` advances the splash pulse one frame
  and returns its scale.
- `blockmenu.loading.LoadProgress`: `advance(elapsed)` returns `True` once the
  bar has filled; `width` and `status` give the bar width and status line;
  `reset()` starts over. Negative times raise `ValueError`.
- `blockmenu.game`: `random_terrain_height(rng)` draws a height between 200
  and 270 pixels; `terrain_rows(grid_height, window_height, terrain_height)`
  lists the `(row, Block)` pairs that hold blocks.
- `blockmenu.engine`: the `Engine` base class that loads the shared assets,
  and `AssetError`, raised when an asset is missing or cannot be decoded.

Each screen's `update`/`user_events` method takes the input state as
arguments, so a screen can be driven by hand once it is built on any
pygame surface.

## What it does not do

- *Multiplayer* does nothing, and *Options...* opens no settings screen.
- The game screen only scrolls and walks; blocks cannot be placed or mined,
  and the terrain has no grass or dirt layers.
- No music is played; the only sound is the button click.

## Tests

```
pip install .[test]
pytest
```