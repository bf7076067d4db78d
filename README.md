# wolfcast

A small first-person game drawn with a grid raycaster. You walk through a
series of walled maps, carry a handful of weapons and make your way to the
exit of each level. Reaching the exit of the last map prints
`You Won bravo !!` and ends the game.

## Installing

```
pip install .
```

## Running

Start the game from a directory that holds the `assets/` folder:

```
wolfcast
```

By default the level file `assets/content/wolf3d.wac` is loaded. Use `-f` to
pick another one (if `-f` is given more than once, the last one wins):

```
wolfcast -f path/to/levels.wac
```

`wolfcast -h`, given alone, prints the usage and the credits.

Before it opens the window, the game checks that these files exist:

- `assets/music/at_dooms_gate.ogg`, `assets/music/running_from_evil.ogg`
- `assets/menu/bouton_play.png`, `assets/menu/bouton_quit.png`,
  `assets/menu/fond_wolf3d.png`, `assets/menu/settings.png`,
  `assets/menu/wolf3d_menu.png`
- `assets/font/Georgia_Bold_Italic.ttf`, `assets/font/Impact.ttf`

If any is missing, if the environment is empty, or if `XDG_SESSION_TYPE` is
`tty`, the program exits with status 84. It also exits with status 84 when
the level file cannot be read, holds no map, or its first map has no spawn,
no exit or is not closed by walls, and later when a following map has no
spawn or no exit. The window opens fullscreen at the desktop resolution.

## Controls

| Key / input        | Action                        |
|--------------------|-------------------------------|
| Z / S              | move forward / backward       |
| Q / D              | strafe left / right           |
| Left Shift         | sprint                        |
| Mouse              | turn                          |
| Mouse button       | shoot (spends one round)      |
| 1 to 5, wheel      | change weapon                 |
| F                  | toggle the flashlight         |
| Escape             | quit                          |

Without the flashlight, walls further than two tiles grow darker. The screen
shows a minimap in the top-left corner, a face showing your health in the
top-right corner and the ammunition count in the bottom-right corner.

The main menu has Play, Quit and a settings button. On the settings screen,
clicking the sound entry turns the music on and off, "Volume general" turns
the weapon sounds on and off, and the resolution entry cycles the window
through 1280×720, 1920×1080 and 800×600. Escape goes back to the menu.

## Level files

A level file is a list of objects separated by `#`. Each object is a list of
fields separated by `:`; the first field names the kind of object, the rest
are key and value pairs. Keys start with a newline. Objects of any other kind
are ignored.

A `map` object needs a `content` key whose value is the grid, one row per
line: `W` is a wall, a space is floor, `S` is the spawn point and `D` is the
exit. An optional `music` key names a music file, played in a loop while the
map is in play.

A `weapon` object has `sprite`, `sound`, `ammo`, `max`, `dmg` and `firerate`
keys. A weapon is skipped when its sound file does not exist, or when its
sprite sheet cannot be loaded or is not between 950 and 1050 pixels wide.
The sheet holds the shooting frames side by side, each 205 pixels wide.

Maps are played in the order they appear in the file; the weapons that are
kept are numbered in the same way, starting from 0.

## Using the modules

- `wolfcast.textfile`: `split_words`, `get_name` and `read_file`.
- `wolfcast.model`: `Weapon`, `GameMap` and `Player`.
- `wolfcast.level`: `load_game_data`, `GameData`, `map_from_fields`,
  `weapon_from_fields`, `check_bounds` and `fill_random`.
- `wolfcast.raycast`: `cast_ray`, `cast_all`, `move_player`, `try_move`,
  `rotate_view`, `wall_color` and `wall_column`.
- `wolfcast.hud`: drawing helpers, `HeadDisplay` and `ShootAnimation`.
- `wolfcast.menu`: `Menu`, `SettingsScreen`, `AudioSettings`,
  `ResolutionCycler` and `video_mode`.
- `wolfcast.game`: `Game`, `parse_arguments`, `missing_assets`,
  `check_environment` and `main`.

## What it does not do

There are no enemies in the game: nothing appears on the maps to shoot at,
and the player's health never changes. A weapon's damage value is read but
not used. There is no way to save or resume a game.

## Tests

```
pip install ".[test]"
pytest
```