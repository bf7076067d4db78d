"""Title menu, settings screen, audio switches and resolution choices."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

import pygame

MENU_DIR = Path("assets/menu")
FONT_PATH = Path("assets/font/Impact.ttf")
WINDOW_TITLE = "wolf3d"

LARGE_WINDOW_WIDTH = 1800
BACKGROUND_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)

TITLE_SIZE = 48
ENTRY_SIZE = 32
TEXT_LEFT = 100


@dataclass(frozen=True)
class VideoMode:
    """A window resolution and colour depth."""

    width: int
    height: int
    bits_per_pixel: int = 32

    @property
    def size(self) -> tuple[int, int]:
        """Width and height as a pair."""
        return self.width, self.height


_MODES = (VideoMode(1280, 720), VideoMode(1920, 1080))
_FALLBACK_MODE = VideoMode(800, 600)


def video_mode(state: int) -> VideoMode:
    """Resolution for step *state* of the settings cycle."""
    if 0 <= state < len(_MODES):
        return _MODES[state]
    return _FALLBACK_MODE


@dataclass
class AudioSettings:
    """Whether music and sound effects are muted."""

    music_muted: bool = False
    sound_muted: bool = False

    def toggle_music(self) -> bool:
        """Flip the music switch; return whether music is now muted."""
        self.music_muted = not self.music_muted
        return self.music_muted

    def toggle_sound(self) -> bool:
        """Flip the sound-effect switch; return whether sound is now muted."""
        self.sound_muted = not self.sound_muted
        return self.sound_muted


@dataclass
class ResolutionCycler:
    """Steps through the available resolutions, one per request."""

    state: int = 0
    count: int = field(default=3, repr=False)

    def next_mode(self) -> VideoMode:
        """Return the resolution for the current step and move to the next."""
        mode = video_mode(self.state)
        self.state = (self.state + 1) % self.count
        return mode


class MenuAction(enum.Enum):
    """What a menu or settings event asks the game to do."""

    NONE = "none"
    PLAY = "play"
    SETTINGS = "settings"
    QUIT = "quit"
    BACK = "back"
    RESIZE = "resize"


def _scaled(image: pygame.Surface, factor: float) -> pygame.Surface:
    width, height = image.get_size()
    return pygame.transform.scale(image, (int(width * factor), int(height * factor)))


def _is_left_click(event: pygame.event.Event) -> bool:
    return event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", 0) == 1


class Menu:
    """The title screen with its play, quit and settings buttons."""

    def __init__(
        self,
        window_size: tuple[int, int],
        background: pygame.Surface,
        play_image: pygame.Surface,
        quit_image: pygame.Surface,
        settings_image: pygame.Surface,
    ) -> None:
        width, height = window_size
        large = width >= LARGE_WINDOW_WIDTH
        self.window_size = (width, height)
        self.background = pygame.transform.scale(background, (width, height))
        self.play_image = _scaled(play_image, 1.0 if large else 0.5)
        self.quit_image = _scaled(quit_image, 0.7 if large else 0.3)
        self.settings_image = _scaled(settings_image, 0.7 if large else 0.4)
        buttons_top = int(height / 1.84)
        self.play_rect = self.play_image.get_rect(
            topleft=(int(width / 4.8), buttons_top)
        )
        self.quit_rect = self.quit_image.get_rect(
            topleft=(int(width / 1.6), buttons_top)
        )
        self.settings_rect = self.settings_image.get_rect(topleft=(20, 20))

    @classmethod
    def load(
        cls, window_size: tuple[int, int], directory: str | Path = MENU_DIR
    ) -> Menu:
        """Build the menu from the images in *directory*.

        Raises pygame.error or OSError when an image cannot be loaded.
        """
        folder = Path(directory)
        return cls(
            window_size,
            pygame.image.load(str(folder / "fond_wolf3d.png")),
            pygame.image.load(str(folder / "bouton_play.png")),
            pygame.image.load(str(folder / "bouton_quit.png")),
            pygame.image.load(str(folder / "settings.png")),
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the background and the buttons on *surface*."""
        surface.fill(BACKGROUND_COLOR)
        surface.blit(self.background, (0, 0))
        surface.blit(self.play_image, self.play_rect)
        surface.blit(self.quit_image, self.quit_rect)
        surface.blit(self.settings_image, self.settings_rect)

    def handle_event(self, event: pygame.event.Event) -> MenuAction:
        """Translate a window event into a menu action."""
        if event.type == pygame.QUIT:
            return MenuAction.QUIT
        if not _is_left_click(event):
            return MenuAction.NONE
        pos = event.pos
        if self.play_rect.collidepoint(pos):
            return MenuAction.PLAY
        if self.quit_rect.collidepoint(pos):
            return MenuAction.QUIT
        if self.settings_rect.collidepoint(pos):
            return MenuAction.SETTINGS
        return MenuAction.NONE


class _TextBlock:
    """Lines of text drawn one under another from a top-left corner."""

    def __init__(
        self, font: pygame.font.Font, text: str, topleft: tuple[int, int]
    ) -> None:
        self.lines = [
            font.render(line, True, TEXT_COLOR)
            for line in text.rstrip("\n").split("\n")
        ]
        self.topleft = topleft
        self.line_height = font.get_linesize()
        width = max(line.get_width() for line in self.lines)
        self.rect = pygame.Rect(topleft, (width, self.line_height * len(self.lines)))

    def draw(self, surface: pygame.Surface) -> None:
        left, top = self.topleft
        for number, line in enumerate(self.lines):
            surface.blit(line, (left, top + number * self.line_height))


class SettingsScreen:
    """The settings page: music, general volume and resolution."""

    def __init__(
        self,
        audio: AudioSettings,
        resolutions: ResolutionCycler | None = None,
        font_path: str | Path | None = FONT_PATH,
    ) -> None:
        self.audio = audio
        self.resolutions = resolutions or ResolutionCycler()
        self.requested_mode: VideoMode | None = None
        path = None if font_path is None else str(font_path)
        title_font = pygame.font.Font(path, TITLE_SIZE)
        entry_font = pygame.font.Font(path, ENTRY_SIZE)
        self._title = _TextBlock(title_font, "Reglages", (TEXT_LEFT, 80))
        self._audio = _TextBlock(
            entry_font, "Son :\n- Activer/Desactiver la musique", (TEXT_LEFT, 190)
        )
        self._volume = _TextBlock(entry_font, "- Volume general", (TEXT_LEFT, 280))
        self._video = _TextBlock(
            entry_font, "Video:\n- Resolution\n", (TEXT_LEFT, 330)
        )

    @property
    def title_rect(self) -> pygame.Rect:
        """Area covered by the page title."""
        return self._title.rect

    @property
    def audio_rect(self) -> pygame.Rect:
        """Area that switches the music on and off."""
        return self._audio.rect

    @property
    def volume_rect(self) -> pygame.Rect:
        """Area that switches the sound effects on and off."""
        return self._volume.rect

    @property
    def video_rect(self) -> pygame.Rect:
        """Area that moves to the next resolution."""
        return self._video.rect

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the settings page on *surface*."""
        surface.fill(BACKGROUND_COLOR)
        for block in (self._title, self._audio, self._video, self._volume):
            block.draw(surface)

    def handle_event(self, event: pygame.event.Event) -> MenuAction:
        """Apply a window event to the settings.

        Returns QUIT when the window is closed, BACK on Escape and RESIZE
        when a new resolution was chosen (kept in ``requested_mode``).
        """
        if event.type == pygame.QUIT:
            return MenuAction.QUIT
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return MenuAction.BACK
        if not _is_left_click(event):
            return MenuAction.NONE
        pos = event.pos
        if self.audio_rect.collidepoint(pos):
            self.audio.toggle_music()
            return MenuAction.NONE
        if self.video_rect.collidepoint(pos):
            self.requested_mode = self.resolutions.next_mode()
            return MenuAction.RESIZE
        if self.volume_rect.collidepoint(pos):
            self.audio.toggle_sound()
        return MenuAction.NONE