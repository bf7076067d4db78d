"""Drawing of the 3D view and the head-up display, and the shooting animation."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

import pygame

from .model import GameMap, Player, Weapon
from .raycast import cast_all, wall_color, wall_column

HEAD_IMAGE = Path("assets/objects/heads.png")
HEAD_FRAME_WIDTH = 76
HEAD_FRAME_HEIGHT = 102
HEAD_THRESHOLDS = (80, 60, 40, 20)
HUD_MARGIN = 10
TEXT_COLOR = (255, 255, 255)

SKY_COLOR = (135, 206, 235)
FLOOR_COLOR = (160, 82, 45)
FLOOR_TOP = 535

MINIMAP_SCALE = 8
MINIMAP_MARGIN = 10
MINIMAP_WALL_COLOR = (100, 100, 100)
MINIMAP_FLOOR_COLOR = (30, 30, 30)
MINIMAP_PLAYER_COLOR = (255, 0, 0)

SHOT_FRAME_SIZE = 205
SHOT_LAST_FRAME = 1000
MIN_SHOT_INTERVAL = 0.1
FIRERATE_UNIT = 0.1


def head_frame_index(hp: int) -> int:
    """Frame of the head sheet that matches *hp*: 0 is healthy, 4 is near death."""
    for index, threshold in enumerate(HEAD_THRESHOLDS):
        if hp > threshold:
            return index
    return len(HEAD_THRESHOLDS)


class HeadDisplay:
    """The face in the top-right corner that shows the player's health."""

    def __init__(
        self,
        image: pygame.Surface,
        frame_width: int = HEAD_FRAME_WIDTH,
        frame_height: int = HEAD_FRAME_HEIGHT,
    ) -> None:
        self.image = image
        self.frame_width = frame_width
        self.frame_height = frame_height

    @classmethod
    def load(cls, path: str | Path = HEAD_IMAGE) -> HeadDisplay:
        """Load the head sheet from *path*; raises pygame.error or OSError."""
        return cls(pygame.image.load(str(path)))

    def draw(self, surface: pygame.Surface, hp: int) -> pygame.Rect:
        """Draw the frame for *hp* and return the area drawn on."""
        area = pygame.Rect(
            head_frame_index(hp) * self.frame_width,
            0,
            self.frame_width,
            self.frame_height,
        )
        dest = (surface.get_width() - self.frame_width - HUD_MARGIN, HUD_MARGIN)
        return surface.blit(self.image, dest, area)


def draw_ammo(
    surface: pygame.Surface, font: pygame.font.Font, ammo: int
) -> pygame.Rect | None:
    """Write the ammunition count in the bottom-right corner.

    Nothing is drawn for a negative count, and None is returned.
    """
    if ammo < 0:
        return None
    text = font.render(str(ammo), True, TEXT_COLOR)
    width, height = text.get_size()
    dest = (
        surface.get_width() - width - HUD_MARGIN,
        surface.get_height() - height - HUD_MARGIN,
    )
    return surface.blit(text, dest)


def draw_floor_and_ceiling(surface: pygame.Surface) -> None:
    """Paint the sky over the whole surface, then the floor below its line."""
    width, height = surface.get_size()
    surface.fill(SKY_COLOR)
    surface.fill(FLOOR_COLOR, pygame.Rect(0, FLOOR_TOP, width, height))


def draw_minimap(surface: pygame.Surface, game_map: GameMap, player: Player) -> None:
    """Draw the map's tiles, the player and the direction it faces."""
    for y, row in enumerate(game_map.rows):
        for x, tile in enumerate(row):
            color = MINIMAP_WALL_COLOR if tile == "W" else MINIMAP_FLOOR_COLOR
            surface.fill(
                color,
                pygame.Rect(
                    MINIMAP_MARGIN + x * MINIMAP_SCALE,
                    MINIMAP_MARGIN + y * MINIMAP_SCALE,
                    MINIMAP_SCALE,
                    MINIMAP_SCALE,
                ),
            )
    radius = MINIMAP_SCALE / 2.5
    left = MINIMAP_MARGIN + player.pos_x * MINIMAP_SCALE - MINIMAP_SCALE // 2
    top = MINIMAP_MARGIN + player.pos_y * MINIMAP_SCALE - MINIMAP_SCALE // 2
    pygame.draw.circle(
        surface, MINIMAP_PLAYER_COLOR, (left + radius, top + radius), radius
    )
    start = (
        MINIMAP_MARGIN + player.pos_x * MINIMAP_SCALE,
        MINIMAP_MARGIN + player.pos_y * MINIMAP_SCALE,
    )
    end = (
        start[0] + player.dir_x * MINIMAP_SCALE * 2,
        start[1] + player.dir_y * MINIMAP_SCALE * 2,
    )
    pygame.draw.line(surface, MINIMAP_PLAYER_COLOR, start, end)


def render_walls(
    surface: pygame.Surface, player: Player, game_map: GameMap
) -> list[float]:
    """Draw one wall slice per column and return the wall distance of each."""
    width, height = surface.get_size()
    z_buffer = []
    for column, ray in enumerate(cast_all(player, game_map, width)):
        start, end = wall_column(ray, height)
        pygame.draw.line(
            surface, wall_color(ray, player), (column, start), (column, end)
        )
        z_buffer.append(ray.perp_wall_dist)
    return z_buffer


@lru_cache(maxsize=None)
def _load_sound(path: str) -> pygame.mixer.Sound:
    return pygame.mixer.Sound(path)


def _play_sound(path: str | None) -> None:
    if not path or not pygame.mixer.get_init():
        return
    try:
        _load_sound(path).play()
    except (pygame.error, OSError, FileNotFoundError):
        pass


@dataclass
class ShootAnimation:
    """The weapon's firing frames, stepped along a horizontal sprite sheet."""

    weapon: Weapon | None = None
    clock_start: float = 0.0
    _left: int = field(default=0, init=False, repr=False)

    def frame_left(self) -> int:
        """Left edge of the current frame in the sprite sheet."""
        return self._left

    def frame_rect(self) -> pygame.Rect:
        """Area of the sprite sheet showing the current frame."""
        return pygame.Rect(self._left, 0, SHOT_FRAME_SIZE, SHOT_FRAME_SIZE)

    def update(self, now: float) -> int:
        """Advance the animation at time *now* (seconds); return the frame."""
        weapon = self.weapon
        if weapon is None:
            return self._left
        if now - self.clock_start >= weapon.firerate * FIRERATE_UNIT:
            if 0 != self._left < SHOT_LAST_FRAME:
                self._left += SHOT_FRAME_SIZE
                self.clock_start = now
            if self._left >= SHOT_LAST_FRAME:
                self._left = 0
                self.clock_start = now
        return self._left

    def trigger(
        self, weapon: Weapon | None, now: float, sound_enabled: bool = True
    ) -> bool:
        """Fire *weapon* at time *now* if it is ready and loaded.

        Returns whether a shot was fired; firing spends one round.
        """
        if weapon is None:
            return False
        self.weapon = weapon
        if (
            self._left != 0
            or now - self.clock_start < MIN_SHOT_INTERVAL
            or weapon.ammo == 0
        ):
            return False
        weapon.ammo -= 1
        if sound_enabled:
            _play_sound(weapon.sound)
        self._left += SHOT_FRAME_SIZE
        self.clock_start = now
        return True