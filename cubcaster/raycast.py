"""A grid ray-casting renderer with keyboard movement."""

from __future__ import annotations

import math
import sys
from array import array
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

TILE_SIZE = 60
WIDTH = 1080
HEIGHT = 800
FOV = 60
SPEED = 15
ROT_SPEED = 0.3

WALL_COLOR = 0xFFFFFF
MINIMAP_WALL = 0x888888
MINIMAP_FLOOR = 0x222222
MINIMAP_PLAYER = 0x00FF00
MINIMAP_SCALE = 10

DEMO_MAP = (
    "1111111",
    "1101111",
    "1000001",
    "100N011",
    "1111111",
)

_FACING_ANGLES = {
    "N": 0.0,
    "E": math.pi / 2,
    "S": math.pi,
    "W": 3 * math.pi / 2,
}


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESC = 53
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


@dataclass
class Player:
    """The player's position in pixels and view angle in radians."""

    x: float
    y: float
    angle: float = 0.0


@dataclass
class Frame:
    """A row-major buffer of 0xRRGGBB pixels."""

    width: int = WIDTH
    height: int = HEIGHT
    pixels: list[int] = field(init=False)

    def __post_init__(self) -> None:
        self.pixels = [0] * (self.width * self.height)

    def __getitem__(self, position: tuple[int, int]) -> int:
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel {position} outside the frame")
        return self.pixels[y * self.width + x]

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; positions outside the frame are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color

    def clear(self) -> None:
        """Set every pixel to black."""
        self.pixels[:] = [0] * len(self.pixels)

    def draw_vertical_line(self, x: int, start_y: int, end_y: int, color: int) -> None:
        """Draw column ``x`` from ``start_y`` to ``end_y`` inclusive, clipped."""
        if not 0 <= x < self.width:
            return
        start_y = max(start_y, 0)
        end_y = min(end_y, self.height - 1)
        if start_y > end_y:
            return
        count = end_y - start_y + 1
        first = start_y * self.width + x
        last = end_y * self.width + x
        self.pixels[first:last + 1:self.width] = [color] * count

    def draw_square(self, x: int, y: int, size: int, color: int) -> None:
        """Fill a ``size`` by ``size`` square with its top-left at ``(x, y)``."""
        for row in range(y, y + size):
            for col in range(x, x + size):
                self.put_pixel(col, row, color)


def player_from_scene(x: float, y: float, facing: str) -> Player:
    """Place a player from scene cell coordinates and a facing letter."""
    return Player(
        x=x * TILE_SIZE,
        y=y * TILE_SIZE,
        angle=_FACING_ANGLES.get(facing, 0.0),
    )


def _inverse(value: float) -> float:
    return math.inf if value == 0 else abs(1 / value)


class Game:
    """A map, a player and the frame they are drawn into."""

    def __init__(
        self,
        map_rows: Sequence[str],
        player: Player,
        frame: Frame | None = None,
    ) -> None:
        self.map = list(map_rows)
        self.player = player
        self.frame = frame if frame is not None else Frame()

    def _is_wall(self, col: int, row: int) -> bool:
        if row < 0 or row >= len(self.map):
            return True
        line = self.map[row]
        if col < 0 or col >= len(line):
            return True
        return line[col] == "1"

    def cast_ray(self, angle: float) -> float:
        """Return the distance in pixels to the first wall along ``angle``."""
        ray_x = math.cos(angle)
        ray_y = math.sin(angle)
        pos_x = self.player.x / TILE_SIZE
        pos_y = self.player.y / TILE_SIZE
        map_x = int(pos_x)
        map_y = int(pos_y)
        delta_x = _inverse(ray_x)
        delta_y = _inverse(ray_y)
        step_x = -1 if ray_x < 0 else 1
        step_y = -1 if ray_y < 0 else 1
        if ray_x < 0:
            side_x = (pos_x - map_x) * delta_x
        else:
            side_x = (map_x + 1.0 - pos_x) * delta_x
        if ray_y < 0:
            side_y = (pos_y - map_y) * delta_y
        else:
            side_y = (map_y + 1.0 - pos_y) * delta_y
        while True:
            if side_x < side_y:
                side_x += delta_x
                map_x += step_x
                vertical = True
            else:
                side_y += delta_y
                map_y += step_y
                vertical = False
            if self._is_wall(map_x, map_y):
                break
        distance = side_x - delta_x if vertical else side_y - delta_y
        return distance * TILE_SIZE

    def _draw_column(self, ray_length: float, col: int, angle_diff: float) -> None:
        corrected = ray_length * math.cos(angle_diff)
        height = self.frame.height
        wall_h = height if corrected <= 0 else min((TILE_SIZE * height) / corrected, height)
        start_y = int(height // 2 - wall_h / 2)
        end_y = int(height // 2 + wall_h / 2)
        self.frame.draw_vertical_line(col, start_y, end_y, WALL_COLOR)

    def _draw_minimap(self) -> None:
        scale = MINIMAP_SCALE
        for y, line in enumerate(self.map):
            for x, char in enumerate(line):
                color = MINIMAP_WALL if char == "1" else MINIMAP_FLOOR
                self.frame.draw_square(x * scale, y * scale, scale, color)
        self.frame.draw_square(
            int(self.player.x / TILE_SIZE) * scale,
            int(self.player.y / TILE_SIZE) * scale,
            scale,
            MINIMAP_PLAYER,
        )

    def render(self) -> None:
        """Draw one wall column per frame column, then the minimap."""
        width = self.frame.width
        angle_step = math.radians(FOV) / width
        start_angle = self.player.angle - math.radians(FOV * 0.5)
        for col in range(width):
            ray_angle = start_angle + col * angle_step
            length = self.cast_ray(ray_angle)
            self._draw_column(length, col, ray_angle - self.player.angle)
        self._draw_minimap()

    def _redraw(self) -> None:
        self.frame.clear()
        self.render()

    def try_move(self, move_x: float, move_y: float, sign: str) -> bool:
        """Move by ``(move_x, move_y)`` (``"+"``) or against it (``"-"``).

        The move is refused when it leaves the screen area or ends inside a
        wall. Returns whether the player moved.
        """
        if not move_x and not move_y:
            return False
        if sign == "+":
            new_x = self.player.x + move_x
            new_y = self.player.y + move_y
        elif sign == "-":
            new_x = self.player.x - move_x
            new_y = self.player.y - move_y
        else:
            raise ValueError(f"unknown move sign {sign!r}")
        if not (0 <= new_y < HEIGHT and 0 <= new_x < WIDTH):
            return False
        if self._is_wall(math.floor(new_x / TILE_SIZE), math.floor(new_y / TILE_SIZE)):
            return False
        self.player.x = new_x
        self.player.y = new_y
        self._redraw()
        return True

    def handle_key(self, key: int) -> bool:
        """React to a key press; returns ``False`` when the game should stop."""
        if key == Key.ESC:
            return False
        angle = self.player.angle
        move_x = move_y = 0.0
        sign = "+"
        if key in (Key.W, Key.UP, Key.S, Key.DOWN):
            move_x = math.cos(angle) * SPEED
            move_y = math.sin(angle) * SPEED
            if key in (Key.S, Key.DOWN):
                sign = "-"
        elif key == Key.A:
            move_x = math.cos(angle - math.pi / 2) * SPEED
            move_y = math.sin(angle - math.pi / 2) * SPEED
        elif key == Key.D:
            move_x = math.cos(angle + math.pi / 2) * SPEED
            move_y = math.sin(angle + math.pi / 2) * SPEED
        new_angle = angle
        if key == Key.LEFT:
            new_angle -= ROT_SPEED
        elif key == Key.RIGHT:
            new_angle += ROT_SPEED
        self.try_move(move_x, move_y, sign)
        if new_angle != self.player.angle:
            self.player.angle = new_angle
            self._redraw()
        return True


def _frame_bytes(frame: Frame) -> bytes:
    data = array("I", (pixel | 0xFF000000 for pixel in frame.pixels))
    if sys.byteorder == "big":
        data.byteswap()
    return data.tobytes()


def _build_game(argv: Sequence[str]) -> Game:
    if not argv:
        return Game(DEMO_MAP, player_from_scene(3.5, 3.5, "N"))
    from .cli import load_scene

    scene = load_scene(argv)
    return Game(scene.map, player_from_scene(scene.x, scene.y, scene.facing))


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and run the renderer until it is closed or ESC is pressed."""
    from .cubfile import CubError

    args = list(sys.argv[1:] if argv is None else argv)
    try:
        game = _build_game(args)
    except CubError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1

    import pygame

    keys = {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.frame.width, game.frame.height))
        pygame.display.set_caption("Raycasting Engine")

        def show() -> None:
            surface = pygame.image.frombuffer(
                _frame_bytes(game.frame), (game.frame.width, game.frame.height), "BGRA"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        game.render()
        show()
        running = True
        while running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in keys:
                running = game.handle_key(keys[event.key])
                if running:
                    show()
    finally:
        pygame.quit()
    return 0