import pygame
import pytest

from wolfcast.menu import (
    AudioSettings,
    Menu,
    MenuAction,
    ResolutionCycler,
    SettingsScreen,
    VideoMode,
    video_mode,
)

BG = (10, 20, 30)
PLAY = (0, 200, 0)
QUIT = (200, 0, 0)
GEAR = (0, 0, 200)


@pytest.fixture(scope="module", autouse=True)
def _fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


def _solid(size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def _menu(window_size=(1920, 1080)):
    return Menu(
        window_size,
        _solid((64, 64), BG),
        _solid((200, 100), PLAY),
        _solid((200, 100), QUIT),
        _solid((100, 100), GEAR),
    )


def _click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


def test_video_modes_match_settings_steps():
    assert video_mode(0) == VideoMode(1280, 720, 32)
    assert video_mode(1) == VideoMode(1920, 1080, 32)
    assert video_mode(2) == VideoMode(800, 600, 32)


def test_unknown_state_falls_back_to_last_mode():
    assert video_mode(7) == video_mode(2)
    assert video_mode(-1) == video_mode(2)


def test_video_mode_size_pair():
    mode = video_mode(1)
    assert mode.size == (mode.width, mode.height)


def test_resolution_cycler_wraps_after_three_steps():
    cycler = ResolutionCycler()
    modes = [cycler.next_mode() for _ in range(4)]
    assert modes == [video_mode(0), video_mode(1), video_mode(2), video_mode(0)]
    assert cycler.state == 1


def test_audio_toggles_flip_and_restore():
    audio = AudioSettings()
    assert audio.toggle_music() is True
    assert audio.music_muted is True
    assert audio.sound_muted is False
    assert audio.toggle_music() is False
    assert audio.toggle_sound() is True
    assert audio.sound_muted is True


def test_menu_buttons_scale_with_window_width():
    small = _menu((1280, 720))
    large = _menu((1920, 1080))
    assert small.play_rect.size == (100, 50)
    assert large.play_rect.size == (200, 100)
    assert small.quit_rect.width < large.quit_rect.width
    assert small.settings_rect.topleft == (20, 20)


def test_menu_clicks_map_to_actions():
    menu = _menu()
    assert menu.handle_event(_click(menu.play_rect.center)) is MenuAction.PLAY
    assert menu.handle_event(_click(menu.quit_rect.center)) is MenuAction.QUIT
    assert (
        menu.handle_event(_click(menu.settings_rect.center)) is MenuAction.SETTINGS
    )


def test_menu_ignores_empty_area_and_right_click():
    menu = _menu()
    assert menu.handle_event(_click((5, 1075))) is MenuAction.NONE
    assert menu.handle_event(_click(menu.play_rect.center, button=3)) is MenuAction.NONE


def test_menu_close_event_quits():
    menu = _menu()
    assert menu.handle_event(pygame.event.Event(pygame.QUIT)) is MenuAction.QUIT


def test_menu_draw_paints_background_and_buttons():
    menu = _menu((1280, 720))
    surface = pygame.Surface((1280, 720))
    menu.draw(surface)
    assert surface.get_at((5, 715))[:3] == BG
    assert surface.get_at(menu.play_rect.center)[:3] == PLAY
    assert surface.get_at(menu.quit_rect.center)[:3] == QUIT
    assert surface.get_at(menu.settings_rect.center)[:3] == GEAR


def _settings(audio=None):
    return SettingsScreen(audio or AudioSettings(), font_path=None)


def test_settings_audio_click_toggles_music():
    audio = AudioSettings()
    screen = _settings(audio)
    assert screen.handle_event(_click(screen.audio_rect.center)) is MenuAction.NONE
    assert audio.music_muted is True
    assert audio.sound_muted is False


def test_settings_volume_click_toggles_sound():
    audio = AudioSettings()
    screen = _settings(audio)
    screen.handle_event(_click(screen.volume_rect.center))
    assert audio.sound_muted is True
    assert audio.music_muted is False


def test_settings_video_click_cycles_resolution():
    screen = _settings()
    assert screen.handle_event(_click(screen.video_rect.center)) is MenuAction.RESIZE
    assert screen.requested_mode == video_mode(0)
    screen.handle_event(_click(screen.video_rect.center))
    assert screen.requested_mode == video_mode(1)


def test_settings_escape_and_close():
    screen = _settings()
    escape = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    assert screen.handle_event(escape) is MenuAction.BACK
    assert screen.handle_event(pygame.event.Event(pygame.QUIT)) is MenuAction.QUIT


def test_settings_entries_do_not_overlap_and_start_at_text_column():
    screen = _settings()
    rects = [screen.title_rect, screen.audio_rect, screen.volume_rect, screen.video_rect]
    assert all(rect.left == 100 for rect in rects)
    assert screen.audio_rect.top == 190
    assert screen.volume_rect.top == 280
    assert screen.video_rect.top == 330


def test_settings_draw_writes_white_text():
    screen = _settings()
    surface = pygame.Surface((800, 600))
    screen.draw(surface)
    area = screen.title_rect
    white = sum(
        1
        for x in range(area.left, area.right)
        for y in range(area.top, area.bottom)
        if surface.get_at((x, y))[:3] == (255, 255, 255)
    )
    assert white > 0
    assert surface.get_at((5, 5))[:3] == (0, 0, 0)