"""Reading a scene file and cutting it into its header and map parts."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .textutil import split_words

_PATH_COUNT = 4
_COLOR_COUNT = 2
_MAP_START = _PATH_COUNT + _COLOR_COUNT + 1


class CubError(Exception):
    """Raised when the arguments or the scene file cannot be used."""


@dataclass
class FileParts:
    """The three parts of a scene file: texture lines, color lines, map lines."""

    paths: list[str] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    map_lines: list[str] = field(default_factory=list)


def check_arguments(argv: Sequence[str]) -> str:
    """Check the command-line arguments (program name excluded).

    Exactly one argument is expected, and its last dot-separated word must
    be ``cub``. Returns that argument.
    """
    if len(argv) != 1:
        raise CubError("Args not valid `'program' 'name map'`")
    name = argv[0]
    words = split_words(name, ".")
    if not words:
        raise CubError("Failed malloc or empty string")
    if words[-1] != "cub":
        raise CubError("You should be write '.cub' !!")
    return name


def is_whitespace(char: str) -> bool:
    """Return whether ``char`` is a space or a newline."""
    return char in (" ", "\n")


def is_blank(line: str) -> bool:
    """Return whether ``line`` holds nothing but spaces and newlines."""
    return all(is_whitespace(char) for char in line)


def _split_keep_newlines(text: str) -> list[str]:
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a scene file into its lines.

    Every line keeps its newline, and one more newline is added to the last
    line. A ``:`` in the file also ends a line, and the pieces left empty by
    it are dropped.
    """
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise CubError(f"In map file: {exc.strerror or exc}") from exc
    lines = _split_keep_newlines(text)
    if not lines:
        raise CubError("Empty file!!")
    joined = "".join(":" + line for line in lines) + "\n"
    return split_words(joined, ":")


def split_parts(lines: Iterable[str]) -> FileParts:
    """Cut the lines of a scene file into paths, colors and map.

    The first four non-blank lines are the texture paths, the next two the
    colors. The map starts at the seventh non-blank line and runs to the end
    of the file, blank lines included.
    """
    lines = list(lines)
    if not lines:
        raise CubError("Empty file!!")
    filled = [index for index, line in enumerate(lines) if not is_blank(line)]
    if len(filled) < _PATH_COUNT:
        raise CubError("Allocation part paths failed !!")
    paths = [lines[index] for index in filled[:_PATH_COUNT]]
    if len(filled) < _PATH_COUNT + _COLOR_COUNT:
        raise CubError("Allocation part colors failed !!")
    colors = [lines[index] for index in filled[_PATH_COUNT:_PATH_COUNT + _COLOR_COUNT]]
    if len(filled) < _MAP_START:
        raise CubError("Allocation part map failed !!")
    map_lines = lines[filled[_MAP_START - 1]:]
    return FileParts(paths=paths, colors=colors, map_lines=map_lines)


def load_parts(path: str | os.PathLike[str]) -> FileParts:
    """Read a scene file and cut it into its parts."""
    return split_parts(read_lines(path))