"""Command that checks a scene file and prints what it describes."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .cubfile import CubError, check_arguments, load_parts
from .scene import Scene, parse_scene


def load_scene(argv: Sequence[str]) -> Scene:
    """Check the arguments, read the named scene file and parse it."""
    path = check_arguments(argv)
    return parse_scene(load_parts(path))


def describe(scene: Scene) -> str:
    """Render a scene as the report the command prints."""
    textures = scene.textures
    lines = [
        f"{path}\n"
        for path in (textures.east, textures.west, textures.south, textures.north)
        if path is not None
    ]
    for label, color in (("C", scene.ceiling), ("F", scene.floor)):
        lines.append(f"{label} red {color.red} \n")
        lines.append(f"{label} green {color.green} \n")
        lines.append(f"{label} blue {color.blue} \n")
    lines.append(f"Pos x player {scene.x:f} \n")
    lines.append(f"Pos y player {scene.y:f} \n")
    lines.extend(scene.map)
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the scene file named on the command line and print it."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        scene = load_scene(args)
    except CubError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    sys.stdout.write(describe(scene))
    return 0


if __name__ == "__main__":
    sys.exit(main())