"""Distance of every room to the exit, as used by the robots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from .parsing import Room

NOT_INITIALIZED = -1
DEAD_END = -2
NO_PATH_MESSAGE = "There is no valid path from start to exit."


class MazeError(ValueError):
    """Raised when the start or the exit has no tunnel at all."""


@dataclass
class MazeCursor:
    """Where the walk stands: the start, the exit and the room last left."""

    start: int
    end: int
    last_index: int


def _link_count(rooms: Sequence[Room], index: int, cursor: MazeCursor) -> int:
    count = len(rooms[index].links)
    terminal = index in (cursor.last_index, cursor.start)
    if count == 1 and not terminal:
        return DEAD_END
    if count == 0 and terminal:
        raise MazeError(NO_PATH_MESSAGE)
    return count


def _mark_dead_ends(rooms: Sequence[Room], cursor: MazeCursor) -> None:
    for index, room in enumerate(rooms):
        if _link_count(rooms, index, cursor) == DEAD_END:
            room.distance = DEAD_END
    for room in rooms:
        if room.links and all(rooms[link].distance == DEAD_END
                              for link in room.links):
            room.distance = DEAD_END


def _stops(rooms: Sequence[Room], cursor: MazeCursor, index: int,
           distance: int) -> bool:
    room = rooms[index]
    if room.distance == DEAD_END:
        return True
    if index == cursor.start:
        if room.distance > distance or room.distance == NOT_INITIALIZED:
            room.distance = distance
            rooms[cursor.last_index].distance = distance - 1
        return True
    if distance != 0 and index == cursor.end:
        rooms[cursor.end].distance = 0
        return True
    return False


def _walk(rooms: Sequence[Room], cursor: MazeCursor, index: int,
          distance: int) -> Iterator[tuple[int, int]]:
    """Visit ``index``; every yielded pair is a room to visit before resuming."""
    room = rooms[index]
    for link in room.links:
        if link == cursor.last_index:
            continue
        if room.distance > distance or room.distance == NOT_INITIALIZED:
            room.distance = distance
        else:
            continue
        cursor.last_index = index
        distance += 1
        yield link, distance
        if _stops(rooms, cursor, index, distance):
            return


def compute_distances(rooms: Sequence[Room], start: int, end: int) -> None:
    """Fill in ``distance`` of each room, walking out from the exit."""
    cursor = MazeCursor(start=start, end=end, last_index=end)
    _mark_dead_ends(rooms, cursor)
    stack = [_walk(rooms, cursor, end, 0)]
    while stack:
        try:
            link, distance = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue
        stack.append(_walk(rooms, cursor, link, distance))