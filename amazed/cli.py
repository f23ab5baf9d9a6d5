"""Command line entry point: read a maze on stdin, print the robots' moves."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence, TextIO

from .distance import MazeError, compute_distances
from .parsing import ParseError, build_rooms, parse_input
from .robots import NoPathError, init_robots, move_robots

EXIT_SUCCESS = 0
EXIT_ERROR = 84


def run(stdin: Iterable[str], stdout: TextIO, stderr: TextIO) -> int:
    """Solve the maze read from ``stdin``; return the exit status."""
    try:
        maze = parse_input(stdin, stdout)
        rooms = build_rooms(maze)
    except ParseError:
        return EXIT_ERROR
    assert maze.start is not None and maze.end is not None
    try:
        compute_distances(rooms, maze.start, maze.end)
    except MazeError as exc:
        stderr.write(f"{exc}\n")
        return EXIT_ERROR
    robots = init_robots(maze.robots, maze.start)
    try:
        move_robots(rooms, robots, maze.start, stdout)
    except NoPathError as exc:
        stdout.write(f"{exc}\n")
        return EXIT_ERROR
    return EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the solver; any argument is an error."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        return EXIT_ERROR
    return run(sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())