"""Ray casting through a tile map, player movement and wall shading."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .model import GameMap, Player

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
MOVE_SPEED = 4
SPRINT_BONUS = 7
MOUSE_SENSITIVITY = 0.002
NO_HIT_DISTANCE = 1e30
BASE_WALL_COLOR = (255, 0, 0)
LIGHT_RANGE = 2.0
MIN_BRIGHTNESS = 0.1


@dataclass
class Ray:
    """State of one ray walking through the grid."""

    ray_dir_x: float = 0.0
    ray_dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    perp_wall_dist: float = 0.0
    step_x: int = 0
    step_y: int = 0
    side: int = 0
    hit: bool = False


def rotate_view(player: Player, delta_x: int) -> None:
    """Turn the player's view by a horizontal mouse movement of *delta_x*."""
    if delta_x == 0:
        return
    angle = -delta_x * MOUSE_SENSITIVITY
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    player.dir_x, player.dir_y = (
        player.dir_x * cos_a - player.dir_y * sin_a,
        player.dir_x * sin_a + player.dir_y * cos_a,
    )
    player.plane_x, player.plane_y = (
        player.plane_x * cos_a - player.plane_y * sin_a,
        player.plane_x * sin_a + player.plane_y * cos_a,
    )


def try_move(
    game_map: GameMap, x: float, y: float, dx: float, dy: float
) -> tuple[float, float]:
    """Move by (dx, dy), sliding along walls; return the new position."""
    next_x, next_y = x + dx, y + dy
    if game_map.cell(int(next_x), int(y)) != "W":
        x = next_x
    if game_map.cell(int(x), int(next_y)) != "W":
        y = next_y
    return x, y


def move_player(
    player: Player,
    game_map: GameMap,
    frame_time: float,
    forward: bool = False,
    backward: bool = False,
    right: bool = False,
    left: bool = False,
    sprint: bool = False,
) -> None:
    """Move the player for one frame according to the keys held."""
    speed = (MOVE_SPEED + (SPRINT_BONUS if sprint else 0)) * frame_time
    steps = []
    if forward:
        steps.append((player.dir_x, player.dir_y))
    if backward:
        steps.append((-player.dir_x, -player.dir_y))
    if right:
        steps.append((player.plane_x, player.plane_y))
    if left:
        steps.append((-player.plane_x, -player.plane_y))
    for step_x, step_y in steps:
        player.pos_x, player.pos_y = try_move(
            game_map, player.pos_x, player.pos_y, step_x * speed, step_y * speed
        )


def _delta(direction: float) -> float:
    return NO_HIT_DISTANCE if direction == 0 else abs(1 / direction)


def _start_ray(player: Player, column: int, screen_width: int) -> Ray:
    camera_x = 2 * column / screen_width - 1
    ray = Ray(
        ray_dir_x=player.dir_x + player.plane_x * camera_x,
        ray_dir_y=player.dir_y + player.plane_y * camera_x,
        map_x=int(player.pos_x),
        map_y=int(player.pos_y),
    )
    ray.delta_dist_x = _delta(ray.ray_dir_x)
    ray.delta_dist_y = _delta(ray.ray_dir_y)
    if ray.ray_dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (player.pos_x - ray.map_x) * ray.delta_dist_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - player.pos_x) * ray.delta_dist_x
    if ray.ray_dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (player.pos_y - ray.map_y) * ray.delta_dist_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - player.pos_y) * ray.delta_dist_y
    return ray


def _walk(ray: Ray, game_map: GameMap) -> None:
    while not ray.hit:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_dist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_dist_y
            ray.map_y += ray.step_y
            ray.side = 1
        if game_map.cell(ray.map_x, ray.map_y) == "W":
            ray.hit = True


def perpendicular_distance(ray: Ray, pos_x: float, pos_y: float) -> float:
    """Distance from the camera plane to the wall the ray hit."""
    if ray.side == 0:
        return (ray.map_x - pos_x + (1 - ray.step_x) // 2) / ray.ray_dir_x
    return (ray.map_y - pos_y + (1 - ray.step_y) // 2) / ray.ray_dir_y


def cast_ray(
    player: Player, game_map: GameMap, column: int, screen_width: int = SCREEN_WIDTH
) -> Ray:
    """Cast the ray for screen *column* until it hits a wall."""
    ray = _start_ray(player, column, screen_width)
    _walk(ray, game_map)
    ray.perp_wall_dist = perpendicular_distance(ray, player.pos_x, player.pos_y)
    return ray


def cast_all(
    player: Player, game_map: GameMap, screen_width: int = SCREEN_WIDTH
) -> list[Ray]:
    """Cast one ray per screen column, left to right."""
    return [
        cast_ray(player, game_map, column, screen_width)
        for column in range(screen_width)
    ]


def wall_color(ray: Ray, player: Player | None = None) -> tuple[int, int, int]:
    """Colour of the wall hit by *ray*, shaded by side and distance."""
    red, green, blue = BASE_WALL_COLOR
    if player is None:
        return red, green, blue
    if ray.side == 1:
        red, green, blue = red // 2, green // 2, blue // 2
    if not player.flashlight_on:
        brightness = 1.0
        if ray.perp_wall_dist > LIGHT_RANGE:
            brightness = 1.0 / (ray.perp_wall_dist / LIGHT_RANGE)
        brightness = max(brightness, MIN_BRIGHTNESS)
        red, green, blue = (int(c * brightness) for c in (red, green, blue))
    return red, green, blue


def wall_column(ray: Ray, screen_height: int = SCREEN_HEIGHT) -> tuple[int, int]:
    """First and last screen row of the wall slice drawn for *ray*."""
    if ray.perp_wall_dist <= 0:
        return 0, screen_height - 1
    line_height = int(screen_height / ray.perp_wall_dist)
    middle = screen_height // 2
    start = max(middle - line_height // 2, 0)
    end = min(middle + line_height // 2, screen_height - 1)
    return start, end