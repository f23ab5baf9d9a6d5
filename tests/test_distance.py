import pytest

from amazed.distance import (
    DEAD_END,
    NOT_INITIALIZED,
    MazeCursor,
    MazeError,
    compute_distances,
)
from amazed.parsing import Room


def _rooms(*links):
    return [Room(name=f"r{i}", links=list(link)) for i, link in enumerate(links)]


def test_exit_gets_distance_zero():
    rooms = _rooms([1], [0, 2], [1])
    compute_distances(rooms, 0, 2)
    assert rooms[2].distance == 0


def test_chain_distances_decrease_toward_exit():
    rooms = _rooms([1], [0, 2], [1, 3], [2])
    compute_distances(rooms, 0, 3)
    middle = [rooms[i].distance for i in (1, 2, 3)]
    assert middle == sorted(middle, reverse=True)
    assert len(set(middle)) == 3
    assert all(d >= 0 for d in middle)


def test_start_is_left_uninitialised_on_a_chain():
    rooms = _rooms([1], [0, 2], [1])
    compute_distances(rooms, 0, 2)
    assert rooms[0].distance == NOT_INITIALIZED


def test_single_link_room_is_dead_end():
    rooms = _rooms([1, 2], [0], [0])
    compute_distances(rooms, 0, 2)
    assert rooms[1].distance == DEAD_END
    assert rooms[2].distance == 0


def test_room_whose_links_are_all_dead_ends_is_dead_end():
    # start -> dead end only; exit -> dead end only
    rooms = _rooms([1], [0], [3], [2])
    compute_distances(rooms, 0, 2)
    assert rooms[1].distance == DEAD_END
    assert rooms[0].distance == DEAD_END
    assert rooms[3].distance == DEAD_END
    assert rooms[2].distance == DEAD_END


def test_start_without_tunnel_raises():
    rooms = _rooms([], [2], [1])
    with pytest.raises(MazeError, match="no valid path"):
        compute_distances(rooms, 0, 2)


def test_exit_without_tunnel_raises():
    rooms = _rooms([1], [0], [])
    with pytest.raises(MazeError):
        compute_distances(rooms, 0, 2)


def test_long_chain_does_not_overflow_the_stack():
    size = 3000
    links = [[1]] + [[i - 1, i + 1] for i in range(1, size - 1)] + [[size - 2]]
    rooms = _rooms(*links)
    compute_distances(rooms, 0, size - 1)
    assert rooms[size - 1].distance == 0
    assert rooms[1].distance > rooms[size - 2].distance


def test_cursor_holds_its_fields():
    cursor = MazeCursor(start=1, end=4, last_index=4)
    cursor.last_index = 2
    assert (cursor.start, cursor.end, cursor.last_index) == (1, 4, 2)