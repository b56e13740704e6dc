"""Checking the parts of a scene file and building the scene they describe."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .cubfile import CubError, FileParts, is_blank, is_whitespace
from .textutil import count_words, parse_int, split_in_two, split_words, trim, trim_all

_LINE_TRIM = " \n"
_PATH_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
_COLOR_KEYS = ("C", "F")
_PLAYER_CHARS = "NSEW"
_DIGITS = "0123456789"
_COLOR_MIN = 0
_COLOR_MAX = 255

_INVALID_PATH = "Invalid path!!"
_INVALID_COLOR = "Invalid color!!"
_INVALID_MAP = "Invalid map!!"


@dataclass(frozen=True)
class Color:
    """An RGB color with components in 0..255."""

    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass
class Textures:
    """The wall texture paths of a scene; unset walls are ``None``."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None


@dataclass
class Scene:
    """A fully checked scene: textures, colors, map rows and player start."""

    textures: Textures
    ceiling: Color
    floor: Color
    map: list[str] = field(default_factory=list)
    x: float = 0.0
    y: float = 0.0
    facing: str = ""


def is_player_char(char: str) -> bool:
    """Return whether ``char`` marks the player's start and facing."""
    return len(char) == 1 and char in _PLAYER_CHARS


def _split_key(line: str, message: str) -> list[str]:
    try:
        return split_in_two(trim(line, _LINE_TRIM), " ")
    except ValueError as exc:
        raise CubError(message) from exc


def parse_paths(lines: Iterable[str]) -> Textures:
    """Read ``NO``/``SO``/``WE``/``EA`` texture lines.

    Each key may appear once and must carry a value.
    """
    textures = Textures()
    for line in lines:
        parts = _split_key(line, _INVALID_PATH)
        attr = _PATH_KEYS.get(parts[0])
        if attr is None or len(parts) < 2 or getattr(textures, attr) is not None:
            raise CubError(_INVALID_PATH)
        setattr(textures, attr, parts[1])
    return textures


def _is_number(text: str) -> bool:
    return all(char in _DIGITS for char in text)


def parse_color_line(line: str) -> tuple[str, Color]:
    """Read one ``C r,g,b`` or ``F r,g,b`` line into its key and color."""
    parts = _split_key(line, _INVALID_COLOR)
    key = parts[0]
    if key not in _COLOR_KEYS or len(parts) < 2:
        raise CubError(_INVALID_COLOR)
    if count_words(parts[1], ",") != 3:
        raise CubError(_INVALID_COLOR)
    numbers = trim_all(split_words(parts[1], ","), " ")
    # Only the green and blue components are checked for stray characters.
    if not all(_is_number(number) for number in numbers[1:]):
        raise CubError(_INVALID_COLOR)
    values = [parse_int(number) for number in numbers]
    if any(not _COLOR_MIN <= value <= _COLOR_MAX for value in values):
        raise CubError(_INVALID_COLOR)
    return key, Color(*values)


def parse_colors(lines: Iterable[str]) -> tuple[Color, Color]:
    """Read the color lines and return ``(ceiling, floor)``.

    A color that no line sets stays black; a later line overrides an
    earlier one with the same key.
    """
    ceiling = Color()
    floor = Color()
    for line in lines:
        key, color = parse_color_line(line)
        if key == "C":
            ceiling = color
        else:
            floor = color
    return ceiling, floor


def _filled_at(row: str, col: int) -> bool:
    return col < len(row) and not is_whitespace(row[col])


def _is_enclosed(line: str, map_lines: Sequence[str], index: int, col: int) -> bool:
    if index + 1 < len(map_lines) and not _filled_at(map_lines[index + 1], col):
        return False
    if col + 1 < len(line) and is_whitespace(line[col + 1]):
        return False
    if index > 0 and not _filled_at(map_lines[index - 1], col):
        return False
    if col > 0 and is_whitespace(line[col - 1]):
        return False
    return True


def check_map_line(line: str, map_lines: Sequence[str], index: int) -> None:
    """Check row ``index`` of the map; raise :class:`CubError` if it is invalid."""
    if line.count("\n") > 1 or line == "\n":
        raise CubError(_INVALID_MAP)
    if is_blank(line):
        return
    for char in line:
        if not (is_whitespace(char) or char in "10" or is_player_char(char)):
            raise CubError(_INVALID_MAP)
    if index == 0 or index == len(map_lines) - 1:
        if any(not (is_whitespace(char) or char == "1") for char in line):
            raise CubError(_INVALID_MAP)
    filled = [char for char in line if not is_whitespace(char)]
    if filled[0] != "1" or filled[-1] != "1":
        raise CubError(_INVALID_MAP)
    for col, char in enumerate(line):
        if char == "0" or is_player_char(char):
            if not _is_enclosed(line, map_lines, index, col):
                raise CubError(_INVALID_MAP)


def parse_map(map_lines: Sequence[str]) -> tuple[float, float, str]:
    """Check the map rows and return the player start as ``(x, y, facing)``.

    The position is the centre of the player's cell; exactly one player
    character must appear.
    """
    if not map_lines:
        raise CubError(_INVALID_MAP)
    players = 0
    x = y = 0.0
    facing = ""
    for index, line in enumerate(map_lines):
        check_map_line(line, map_lines, index)
        for col, char in enumerate(line):
            if is_player_char(char):
                x = col + 0.5
                y = index + 0.5
                facing = char
                players += 1
    if players != 1:
        raise CubError(_INVALID_MAP)
    return x, y, facing


def parse_scene(parts: FileParts) -> Scene:
    """Check every part of a scene file and build the scene."""
    textures = parse_paths(parts.paths)
    ceiling, floor = parse_colors(parts.colors)
    x, y, facing = parse_map(parts.map_lines)
    return Scene(
        textures=textures,
        ceiling=ceiling,
        floor=floor,
        map=list(parts.map_lines),
        x=x,
        y=y,
        facing=facing,
    )