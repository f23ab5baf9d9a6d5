"""Reading an anthill description: robot count, rooms and tunnels."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Callable, Iterable, Optional, TextIO

COMMENT_CHAR = "#"
START_COMMAND = "##start"
END_COMMAND = "##end"
_WORD_DELIMS = "\t "
_DIGITS = "0123456789"
_LEADING_NUMBER = re.compile(r"[0-9]+")


class LineType(Enum):
    """Kind of a meaningful input line."""

    NONE = 0
    NB_ROBOT = 1
    ROOMS = 2
    TUNNELS = 3
    START = 4
    END = 5


class ParseError(ValueError):
    """Raised when the input does not describe a valid anthill."""


@dataclass
class RoomInfo:
    """A room as declared in the input."""

    id: int
    name: str
    x: Optional[int]
    y: Optional[int]
    start: bool = False
    end: bool = False


@dataclass
class Room:
    """A room ready for path finding: its links and its distance to the end."""

    name: str
    links: list[int] = field(default_factory=list)
    distance: int = -1
    occupied: bool = False


@dataclass
class Maze:
    """Everything collected while parsing the input."""

    robots: int = -1
    rooms: list[RoomInfo] = field(default_factory=list)
    tunnels: Optional[list[set[int]]] = None
    start: Optional[int] = None
    end: Optional[int] = None

    @property
    def start_name(self) -> Optional[str]:
        return None if self.start is None else self.rooms[self.start].name

    @property
    def end_name(self) -> Optional[str]:
        return None if self.end is None else self.rooms[self.end].name

    def index_of(self, name: str) -> Optional[int]:
        """Return the id of the room called ``name``, or None."""
        return next((room.id for room in self.rooms if room.name == name), None)


def split_words(line: str, delims: str, stay: str) -> list[str]:
    """Split ``line`` on any char of ``delims``.

    A char of ``stay`` opens a segment kept whole up to the same char.
    """
    words: list[str] = []
    i = 0
    size = len(line)
    while i < size:
        char = line[i]
        if char in delims:
            i += 1
            continue
        if char in stay:
            close = line.find(char, i + 1)
            if close == -1:
                words.append(line[i + 1:])
                i = size
            else:
                words.append(line[i + 1:close])
                i = close + 1
            continue
        j = i
        while j < size and line[j] not in delims:
            j += 1
        words.append(line[i:j])
        i = j
    return words


def parse_number(text: Optional[str]) -> Optional[int]:
    """Return the number made of the leading digits of ``text``, or None."""
    if text is None:
        return None
    match = _LEADING_NUMBER.match(text)
    return int(match.group()) if match else None


def is_number(text: str) -> bool:
    """Tell whether ``text`` holds only decimal digits (true when empty)."""
    return all(char in _DIGITS for char in text)


def is_tunnel(line: str) -> bool:
    """Tell whether ``line`` holds a dash."""
    return "-" in line


def _is_tunnel_type(line: str) -> bool:
    dash = line.find("-")
    return 0 < dash < len(line) - 1


def _room_type(line: str) -> LineType:
    words = split_words(line, _WORD_DELIMS, "")
    ends_blank = line[-1:] in (" ", "\t")
    if ends_blank and len(words) == 2 and is_number(words[1]):
        return LineType.ROOMS
    if len(words) == 3 and is_number(words[1]) and is_number(words[2]):
        return LineType.ROOMS
    return LineType.NONE


def get_line_type(line: str) -> LineType:
    """Classify a line that has been stripped of its newline and comment."""
    if line == START_COMMAND:
        return LineType.START
    if line == END_COMMAND:
        return LineType.END
    if is_number(line):
        return LineType.NB_ROBOT
    if _is_tunnel_type(line):
        return LineType.TUNNELS
    return _room_type(line)


def _put_nb_robot(line: str, maze: Maze) -> None:
    count = parse_number(line)
    if count is None or count <= 0:
        raise ParseError(f"invalid number of robots: {line!r}")
    maze.robots = count


def _put_room(line: str, maze: Maze, *, start: bool = False,
              end: bool = False) -> None:
    words = split_words(line, _WORD_DELIMS, "")
    room = RoomInfo(
        id=len(maze.rooms),
        name=words[0],
        x=parse_number(words[1]),
        y=parse_number(words[2] if len(words) > 2 else None),
        start=start,
        end=end,
    )
    for other in maze.rooms:
        if other.name == room.name:
            raise ParseError(f"duplicate room name: {room.name!r}")
        if (other.x, other.y) == (room.x, room.y):
            raise ParseError(f"duplicate room coordinates: {line!r}")
    maze.rooms.append(room)


def _put_tunnel(line: str, maze: Maze) -> None:
    first, _, second = line.partition("-")
    left = maze.index_of(first)
    if left is None:
        raise ParseError(f"unknown room in tunnel: {first!r}")
    right = maze.index_of(second)
    if right is None:
        raise ParseError(f"unknown room in tunnel: {second!r}")
    assert maze.tunnels is not None
    maze.tunnels[left].add(right)
    maze.tunnels[right].add(left)


def _end_rooms(line: str, maze: Maze) -> None:
    for room in maze.rooms:
        if room.start:
            if maze.start is not None:
                raise ParseError("more than one start room")
            maze.start = room.id
        if room.end:
            if maze.end is not None:
                raise ParseError("more than one end room")
            maze.end = room.id
    if maze.start is None or maze.end is None:
        raise ParseError("missing start or end room")
    maze.tunnels = [set() for _ in maze.rooms]
    _put_tunnel(line, maze)


_Handler = Callable[[str, Maze], None]

_ALLOWED: dict[tuple[LineType, LineType], _Handler] = {
    (LineType.NB_ROBOT, LineType.NONE): _put_nb_robot,
    (LineType.ROOMS, LineType.NB_ROBOT): _put_room,
    (LineType.ROOMS, LineType.ROOMS): _put_room,
    (LineType.ROOMS, LineType.START): partial(_put_room, start=True),
    (LineType.ROOMS, LineType.END): partial(_put_room, end=True),
    (LineType.TUNNELS, LineType.ROOMS): _end_rooms,
    (LineType.TUNNELS, LineType.TUNNELS): _put_tunnel,
}


def _apply(kind: LineType, prev: LineType, line: str, maze: Maze) -> None:
    if kind in (LineType.START, LineType.END) and \
            prev in (LineType.ROOMS, LineType.NB_ROBOT):
        return
    handler = _ALLOWED.get((kind, prev))
    if handler is None:
        raise ParseError(f"unexpected line {line!r}")
    handler(line, maze)


def _is_blank(line: str) -> bool:
    if line.startswith(COMMENT_CHAR):
        return False
    for char in line:
        if char in ("\n", COMMENT_CHAR):
            return True
        if char not in " \t":
            return False
    return False


def _clean(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line in (START_COMMAND, END_COMMAND):
        return line
    return line.split(COMMENT_CHAR, 1)[0]


def parse_input(lines: Iterable[str], out: Optional[TextIO] = None) -> Maze:
    """Parse the description, echoing its meaningful lines to ``out``."""
    out = sys.stdout if out is None else out
    maze = Maze()
    prev = LineType.NONE
    for raw in lines:
        if _is_blank(raw):
            raise ParseError("empty line")
        line = _clean(raw)
        if not line:
            continue
        kind = get_line_type(line)
        _apply(kind, prev, line, maze)
        if prev is LineType.NONE:
            out.write("#number_of_robots\n")
        if kind is LineType.TUNNELS and prev is LineType.ROOMS:
            out.write("#tunnels\n")
        if line[-1] in " \t":
            line = line[:-1]
        out.write(line + "\n")
        if prev is LineType.NONE:
            out.write("#rooms\n")
        prev = kind
    if prev in (LineType.NONE, LineType.ROOMS):
        raise ParseError("incomplete description")
    if maze.tunnels is None:
        raise ParseError("no tunnels")
    return maze


def build_rooms(maze: Maze) -> list[Room]:
    """Build the room table, each room linked to its neighbours in id order."""
    if maze.tunnels is None:
        raise ParseError("no tunnels")
    return [Room(name=info.name, links=sorted(maze.tunnels[info.id]))
            for info in maze.rooms]