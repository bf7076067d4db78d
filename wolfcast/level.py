"""Loading levels and weapons from a game description file."""

from __future__ import annotations

import random
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .model import GameMap, Player, Weapon
from .textfile import get_name, read_file, split_words

OBJECT_SEPARATOR = "#"
FIELD_SEPARATOR = ":"
ROW_SEPARATOR = "\n"
SPRITE_MIN_WIDTH = 950
SPRITE_MAX_WIDTH = 1050
ENEMY_CHANCE = 10

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


class LevelError(ValueError):
    """Raised when a level cannot be played."""


def _atoi(text: str) -> int:
    """Parse the integer at the start of *text*, or 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def _sprite_is_usable(path: str) -> bool:
    """Whether the sprite sheet at *path* loads and has the expected width."""
    try:
        surface = pygame.image.load(path)
    except (pygame.error, OSError):
        return False
    return SPRITE_MIN_WIDTH <= surface.get_width() <= SPRITE_MAX_WIDTH


def map_from_fields(fields: Sequence[str], map_id: int) -> GameMap | None:
    """Build a map from the fields of a "map" object, or None without content."""
    content = get_name("\ncontent", fields)
    if content is None:
        return None
    return GameMap(
        rows=split_words(content, ROW_SEPARATOR),
        id=map_id,
        music=get_name("\nmusic", fields),
    )


def weapon_from_fields(fields: Sequence[str], weapon_id: int) -> Weapon | None:
    """Build a weapon from the fields of a "weapon" object.

    Returns None when its sound file is missing or its sprite sheet cannot
    be loaded or has the wrong size.
    """
    weapon = Weapon(id=weapon_id)
    for key, attribute in (
        ("\nammo", "ammo"),
        ("\ndmg", "damage"),
        ("\nmax", "max_ammo"),
        ("\nfirerate", "firerate"),
    ):
        value = get_name(key, fields)
        if value is not None:
            setattr(weapon, attribute, _atoi(value))
    sound = get_name("\nsound", fields)
    sprite = get_name("\nsprite", fields)
    if sound is None or not Path(sound).is_file():
        return None
    if sprite is None or not _sprite_is_usable(sprite):
        return None
    weapon.sound = sound
    weapon.sprite = sprite
    return weapon


@dataclass
class GameData:
    """Everything loaded for a game: the player and the maps still to play."""

    player: Player = field(default_factory=Player)
    maps: list[GameMap] = field(default_factory=list)
    _next_map_id: int = field(default=0, init=False, repr=False)
    _next_weapon_id: int = field(default=0, init=False, repr=False)

    @property
    def current_map(self) -> GameMap | None:
        """The map being played, if any."""
        return self.maps[0] if self.maps else None

    def add_object(self, fields: Sequence[str]) -> GameMap | Weapon | None:
        """Add the map or weapon described by *fields*; others are ignored."""
        if not fields:
            return None
        kind = fields[0]
        if kind == "map":
            game_map = map_from_fields(fields, self._next_map_id)
            if game_map is not None:
                self.maps.append(game_map)
                self._next_map_id += 1
            return game_map
        if kind == "weapon":
            weapon = weapon_from_fields(fields, self._next_weapon_id)
            if weapon is not None:
                self.player.add_weapon(weapon)
                self._next_weapon_id += 1
            return weapon
        return None

    def advance_map(self) -> GameMap | None:
        """Drop the current map and place the player on the next one.

        Returns None when there is no next map. Raises LevelError when the
        next map lacks a spawn or an exit.
        """
        if len(self.maps) < 2:
            return None
        self.maps.pop(0)
        new_map = self.maps[0]
        self.player.locate_in(new_map)
        if not self.player.is_placed():
            raise LevelError(f"map {new_map.id} has no spawn or no exit")
        return new_map


def load_game_data(path: str | Path) -> GameData:
    """Load the maps and weapons described in the file at *path*."""
    data = GameData()
    for chunk in split_words(read_file(path), OBJECT_SEPARATOR):
        data.add_object(split_words(chunk, FIELD_SEPARATOR))
    return data


def _line_is_closed(rows: Sequence[str], i: int) -> bool:
    above = len(rows[i - 1])
    below = len(rows[i + 1]) if i + 1 < len(rows) else 0
    row = rows[i]
    return not any(
        row[j] == " " and (below <= j or above < j)
        for j in range(1, len(row) - 1)
    )


def _is_enclosed(rows: Sequence[str]) -> bool:
    if not rows:
        return False
    if set(rows[0]) - {"W"} or set(rows[-1]) - {"W"}:
        return False
    for row in rows[1:-1]:
        if len(row) < 2 or row[0] != "W" or row[-1] != "W":
            return False
    return all(_line_is_closed(rows, i) for i in range(1, len(rows)))


def check_bounds(maps: Iterable[GameMap]) -> bool:
    """Whether every map is closed by walls with no gap to the outside."""
    return all(_is_enclosed(game_map.rows) for game_map in maps)


def fill_random(game_map: GameMap, rng: random.Random | None = None) -> GameMap:
    """Replace every inner non-wall tile with an enemy or empty floor."""
    rng = rng or random.Random()
    width = game_map.length
    for y in range(1, game_map.height - 1):
        row = list(game_map.rows[y])
        for x in range(1, min(width - 1, len(row))):
            draw = rng.randrange(ENEMY_CHANCE)
            if row[x] != "W":
                row[x] = "E" if draw == 0 else " "
        game_map.rows[y] = "".join(row)
    return game_map