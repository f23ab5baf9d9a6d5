"""Moving the robots from the start room to the exit, turn by turn."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from .distance import DEAD_END, NOT_INITIALIZED
from .parsing import Room

BEGIN_ROOM = -3
NO_PATH_MESSAGE = "There is no valid path from start to exit"


class NoPathError(RuntimeError):
    """Raised when the robots cannot reach the exit."""


@dataclass
class Robot:
    """A robot: its number, the room it stands in and its progress."""

    number: int
    room: int
    step: int = 0
    arrived: bool = False
    arrived_printed: bool = False


def init_robots(count: int, start: int) -> list[Robot]:
    """Create ``count`` robots numbered from 1, all in the start room."""
    return [Robot(number=n, room=start) for n in range(1, count + 1)]


def is_valid(rooms: Sequence[Room], start: int) -> bool:
    """Tell whether some neighbour of the start leads toward the exit."""
    total = sum(rooms[link].distance for link in rooms[start].links
                if rooms[link].distance > 0)
    return total > 0


def _choose_room(robot: Robot, rooms: Sequence[Room], start: int) -> None:
    if robot.arrived:
        return
    best_distance = BEGIN_ROOM
    target = start
    for link in rooms[robot.room].links:
        room = rooms[link]
        if ((best_distance > room.distance or best_distance == BEGIN_ROOM)
                and not room.occupied
                and room.distance not in (DEAD_END, NOT_INITIALIZED)):
            best_distance = room.distance
            target = link
    rooms[robot.room].occupied = False
    if rooms[target].distance != 0:
        rooms[target].occupied = True
    if robot.room != target:
        robot.step += 1
        robot.room = target


def _report(robot: Robot, rooms: Sequence[Room], out: TextIO) -> None:
    if robot.step != 0 and not robot.arrived_printed:
        out.write(f"P{robot.number}-{rooms[robot.room].name} ")
    if robot.arrived:
        robot.arrived_printed = True


def _state(rooms: Sequence[Room], robots: Sequence[Robot]) -> tuple:
    return (
        tuple((r.room, r.step > 0, r.arrived, r.arrived_printed)
              for r in robots),
        tuple(room.occupied for room in rooms),
    )


def move_robots(rooms: Sequence[Room], robots: Sequence[Robot], start: int,
                out: Optional[TextIO] = None) -> None:
    """Play turns until every robot is at the exit, one line per turn."""
    out = sys.stdout if out is None else out
    if not is_valid(rooms, start):
        raise NoPathError(NO_PATH_MESSAGE)
    seen: set[tuple] = set()
    while not all(robot.arrived for robot in robots):
        for robot in robots:
            _choose_room(robot, rooms, start)
            robot.arrived = rooms[robot.room].distance == 0
            _report(robot, rooms, out)
        out.write("\n")
        # The turns are deterministic: a repeated state would repeat forever.
        state = _state(rooms, robots)
        if state in seen:
            raise NoPathError("robots cannot reach the exit")
        seen.add(state)


def format_rooms(rooms: Sequence[Room]) -> str:
    """Describe every room with its distance, status and links."""
    return "".join(
        f"ROOM => {room.name}, distance {room.distance}, "
        f"status {int(room.occupied)} links => "
        + "".join(f"[ {link} ]" for link in room.links)
        + "\n"
        for room in rooms
    )


def format_robots(robots: Sequence[Robot]) -> str:
    """Describe every robot with the room it stands in."""
    return "".join(f"ROBOT => {robot.number}  rooms => {robot.room}"
                   for robot in robots)