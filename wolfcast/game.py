"""The game itself: start-up checks, command line and the main loop."""

from __future__ import annotations

import enum
import math
import os
import sys
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

import pygame

from .hud import (
    SHOT_FRAME_SIZE,
    HeadDisplay,
    ShootAnimation,
    draw_ammo,
    draw_floor_and_ceiling,
    draw_minimap,
    render_walls,
)
from .level import GameData, LevelError, check_bounds, load_game_data
from .menu import (
    FONT_PATH,
    WINDOW_TITLE,
    AudioSettings,
    Menu,
    MenuAction,
    ResolutionCycler,
    SettingsScreen,
)
from .model import Weapon
from .raycast import move_player, rotate_view

DEFAULT_LEVEL = "assets/content/wolf3d.wac"
EXIT_SUCCESS = 0
EXIT_FAILURE = 84
FRAME_RATE = 60
AMMO_FONT_SIZE = 24
WEAPON_ORIGIN = (140, 102)
WIN_MESSAGE = "You Won bravo !!"

REQUIRED_ASSETS = (
    Path("assets/music/at_dooms_gate.ogg"),
    Path("assets/music/running_from_evil.ogg"),
    Path("assets/menu/bouton_play.png"),
    Path("assets/menu/bouton_quit.png"),
    Path("assets/menu/fond_wolf3d.png"),
    Path("assets/menu/settings.png"),
    Path("assets/menu/wolf3d_menu.png"),
    Path("assets/font/Georgia_Bold_Italic.ttf"),
    Path("assets/font/Impact.ttf"),
)

USAGE = (
    "plafond image: \n"
    "Music: \n\n"
    "USAGE :  wolfcast [file] \n"
    "file: -f opens the file that you choose to open the"
    " game, if the file doesn't exist, the original game"
    " launches"
)

_SLOT_KEYS = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
    pygame.K_5: 5,
}


def missing_assets(root: str | Path = ".") -> list[Path]:
    """Return the required asset files, relative to *root*, that are absent."""
    base = Path(root)
    return [asset for asset in REQUIRED_ASSETS if not (base / asset).is_file()]


def check_environment(environ: Mapping[str, str]) -> bool:
    """Whether the environment can host a graphical session.

    An empty environment or a plain text console ("tty") cannot.
    """
    if not environ:
        return False
    return environ.get("XDG_SESSION_TYPE") != "tty"


@dataclass(frozen=True)
class Options:
    """What the command line asks for."""

    filepath: str = DEFAULT_LEVEL
    show_help: bool = False


def parse_arguments(argv: Sequence[str]) -> Options:
    """Read "-f <file>" (the last one wins) and a lone "-h"."""
    args = list(argv)
    filepath = DEFAULT_LEVEL
    for index, arg in enumerate(args):
        if arg == "-f":
            filepath = args[index + 1] if index + 1 < len(args) else DEFAULT_LEVEL
    return Options(filepath=filepath, show_help=args == ["-h"])


class Transition(enum.Enum):
    """Outcome of checking whether the player reached the exit."""

    CONTINUE = "continue"
    NEXT_MAP = "next_map"
    WON = "won"


class Game:
    """A game session over the maps and weapons of one description file."""

    def __init__(self, data: GameData, audio: AudioSettings | None = None) -> None:
        self.data = data
        self.audio = audio or AudioSettings()
        self._resolutions = ResolutionCycler()
        self._shoot = ShootAnimation()
        self._playing_music: str | None = None
        self._broken_music: set[str] = set()
        self._sprites: dict[str, pygame.Surface | None] = {}
        self._open = False
        self._screen: pygame.Surface | None = None
        self._menu: Menu | None = None
        self._head: HeadDisplay | None = None
        self._font: pygame.font.Font | None = None

    @classmethod
    def from_file(cls, path: str | Path) -> Game:
        """Load a game from *path* and place the player on the first map.

        Raises OSError when the file cannot be read, and ValueError (or its
        subclass LevelError) when it holds no playable map.
        """
        data = load_game_data(path)
        first = data.current_map
        if first is None:
            raise LevelError(f"{path}: no map found")
        data.player.locate_in(first)
        if not data.player.is_placed():
            raise LevelError(f"map {first.id} has no spawn or no exit")
        if not check_bounds(data.maps):
            raise LevelError(f"{path}: a map is not closed by walls")
        return cls(data)

    def check_transition(self) -> Transition:
        """Move on to the next map, or win, once the player reaches the exit.

        Raises LevelError when the next map has no spawn or no exit.
        """
        player = self.data.player
        distance = math.hypot(player.pos_x - player.end_x, player.pos_y - player.end_y)
        if distance >= 1:
            return Transition.CONTINUE
        if len(self.data.maps) < 2:
            return Transition.WON
        self._stop_music()
        self.data.advance_map()
        return Transition.NEXT_MAP

    def run(self) -> int:
        """Open the window, show the menu and play; return the exit status."""
        pygame.init()
        try:
            self._screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            pygame.display.set_caption(WINDOW_TITLE)
            self._menu = Menu.load(self._screen.get_size())
            self._head = self._load_head()
            self._font = pygame.font.Font(str(FONT_PATH), AMMO_FONT_SIZE)
            return self._loop()
        except LevelError:
            return EXIT_FAILURE
        except (pygame.error, OSError):
            return EXIT_FAILURE
        finally:
            self._stop_music()
            pygame.quit()

    def _loop(self) -> int:
        clock = pygame.time.Clock()
        self._open = True
        playing = False
        while self._open:
            frame_time = clock.tick(FRAME_RATE) / 1000
            if not playing:
                playing = self._menu_frame()
                continue
            self._play_music()
            fired = self._handle_game_events()
            if not self._open:
                break
            pygame.mouse.set_visible(False)
            self._refresh(frame_time, fired)
            if self.check_transition() is Transition.WON:
                print(WIN_MESSAGE)
                return EXIT_SUCCESS
        return EXIT_SUCCESS

    def _menu_frame(self) -> bool:
        play = False
        for event in pygame.event.get():
            action = self._menu.handle_event(event)
            if action is MenuAction.QUIT:
                self._open = False
            elif action is MenuAction.PLAY:
                play = True
            elif action is MenuAction.SETTINGS:
                self._run_settings()
        if self._open:
            self._menu.draw(self._screen)
            pygame.display.flip()
        return play

    def _run_settings(self) -> None:
        settings = SettingsScreen(self.audio, self._resolutions)
        clock = pygame.time.Clock()
        while self._open:
            for event in pygame.event.get():
                action = settings.handle_event(event)
                if action is MenuAction.QUIT:
                    self._open = False
                    return
                if action is MenuAction.BACK:
                    return
                if action is MenuAction.RESIZE and settings.requested_mode:
                    self._screen = pygame.display.set_mode(
                        settings.requested_mode.size
                    )
                    self._menu = Menu.load(self._screen.get_size())
            settings.draw(self._screen)
            pygame.display.flip()
            clock.tick(FRAME_RATE)

    def _handle_game_events(self) -> bool:
        fired = False
        player = self.data.player
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._open = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._open = False
                elif event.key == pygame.K_f:
                    player.flashlight_on = not player.flashlight_on
                elif event.key in _SLOT_KEYS:
                    player.select_weapon_slot(_SLOT_KEYS[event.key])
            elif event.type == pygame.MOUSEWHEEL:
                player.scroll_weapon(event.y)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                fired = True
        return fired

    def _refresh(self, frame_time: float, fired: bool) -> None:
        screen = self._screen
        player = self.data.player
        game_map = self.data.current_map
        screen.fill((0, 0, 0))
        draw_floor_and_ceiling(screen)
        self._rotate_with_mouse()
        keys = pygame.key.get_pressed()
        move_player(
            player,
            game_map,
            frame_time,
            forward=keys[pygame.K_z],
            backward=keys[pygame.K_s],
            right=keys[pygame.K_d],
            left=keys[pygame.K_q],
            sprint=keys[pygame.K_LSHIFT],
        )
        render_walls(screen, player, game_map)
        weapon = player.weapon
        if weapon is not None:
            self._draw_weapon(weapon)
            draw_ammo(screen, self._font, weapon.ammo)
            now = time.monotonic()
            self._shoot.weapon = weapon
            self._shoot.update(now)
            if fired:
                self._shoot.trigger(weapon, now, not self.audio.sound_muted)
        draw_minimap(screen, game_map, player)
        if self._head is not None:
            self._head.draw(screen, player.hp)
        pygame.display.flip()

    def _rotate_with_mouse(self) -> None:
        width, height = self._screen.get_size()
        center = (width // 2, height // 2)
        delta_x = pygame.mouse.get_pos()[0] - center[0]
        if delta_x:
            rotate_view(self.data.player, delta_x)
            pygame.mouse.set_pos(center)

    def _draw_weapon(self, weapon: Weapon) -> None:
        image = self._sprite(weapon.sprite)
        if image is None:
            return
        width, height = self._screen.get_size()
        dest = (
            width // 2 - WEAPON_ORIGIN[0],
            height - SHOT_FRAME_SIZE - WEAPON_ORIGIN[1],
        )
        self._screen.blit(image, dest, self._shoot.frame_rect())

    def _sprite(self, path: str | None) -> pygame.Surface | None:
        if not path:
            return None
        if path not in self._sprites:
            try:
                self._sprites[path] = pygame.image.load(path)
            except (pygame.error, OSError):
                self._sprites[path] = None
        return self._sprites[path]

    @staticmethod
    def _load_head() -> HeadDisplay | None:
        try:
            return HeadDisplay.load()
        except (pygame.error, OSError):
            return None

    def _play_music(self) -> None:
        game_map = self.data.current_map
        path = game_map.music if game_map else None
        if self.audio.music_muted or not path or path in self._broken_music:
            return
        if not pygame.mixer.get_init():
            return
        if self._playing_music == path and pygame.mixer.music.get_busy():
            return
        try:
            pygame.mixer.music.load(path)
            pygame.mixer.music.play(-1)
        except pygame.error:
            self._broken_music.add(path)
            return
        self._playing_music = path

    def _stop_music(self) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()
        self._playing_music = None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game from the command line; return the exit status."""
    options = parse_arguments(sys.argv[1:] if argv is None else argv)
    if options.show_help:
        print(USAGE)
        return EXIT_SUCCESS
    if missing_assets(".") or not check_environment(os.environ):
        return EXIT_FAILURE
    try:
        game = Game.from_file(options.filepath)
    except (OSError, ValueError):
        return EXIT_FAILURE
    return game.run()


if __name__ == "__main__":
    sys.exit(main())