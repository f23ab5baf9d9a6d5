# amazed

`amazed` reads a maze from standard input. The maze is made of rooms joined
by tunnels. The program moves numbered robots from the start room to the
exit and writes one line of moves per turn.

## Installing

    pip install .

To also install the test requirements:

    pip install .[test]

## Running

    amazed < maze.txt

`python -m amazed.cli < maze.txt` does the same thing.

The command takes no arguments. If you pass any, it exits with status 84
and does nothing else.

## Input format

```
3
##start
entry 0 0
a 1 0
##end
exit 2 0
entry-a
a-exit
```

* The first meaningful line gives the number of robots. It must be a
  positive integer.
* Room lines come next, in the form `name x y`, where the coordinates are
  decimal digits. Two rooms may not share a name or the same coordinates.
* `##start` marks the room on the following line as the start room, and
  `##end` marks the room on the following line as the exit. The input must
  have exactly one of each.
* Tunnel lines come last, in the form `name1-name2`. Both names must be
  rooms declared earlier. The input must contain at least one tunnel.
* Text from `#` to the end of a line is a comment and is ignored. The
  exceptions are the `##start` and `##end` lines. A line that holds only a
  comment is skipped.
* A blank line, including one made only of spaces or tabs, is an error.
* Lines that arrive out of order are errors. For example, a room after the
  tunnels is rejected.

## Output

The program first writes back the meaningful input lines, with comments
removed. These lines fall under the headings `#number_of_robots`, `#rooms`
and `#tunnels`. After that, each turn prints one line. In that line, every
robot that moved gives its move as `P<number>-<room>`, for example `P1-a`.
A robot that reaches the exit is reported once and then drops out of later
lines.

## Exit status

* `0`: every robot reached the exit.
* `84`: any of the following happened:
  * the input was invalid;
  * the start room or the exit has no tunnel at all; the program writes
    `There is no valid path from start to exit.` to standard error;
  * no neighbour of the start room leads toward the exit, or the robots
    stop making progress; a message is written to standard output.

## Using it from Python

```python
import io
from amazed.cli import run

out = io.StringIO()
status = run(io.StringIO(maze_text), out, io.StringIO())
print(status, out.getvalue())
```

`run(stdin, stdout, stderr)` takes any iterable of lines and two writable
text streams. It returns the exit status.

The individual steps are also available:

* `amazed.parsing`:
  * `parse_input(lines, out)` returns a `Maze` and echoes the input to
    `out`. It raises `ParseError` on invalid input.
  * `build_rooms(maze)` turns the `Maze` into a list of `Room` objects with
    their links.
  * `get_line_type`, `split_words`, `parse_number`, `is_number` and
    `is_tunnel` are the line-level helpers the parser uses.
* `amazed.distance`: `compute_distances(rooms, start, end)` fills in each
  room's `distance` to the exit. It raises `MazeError` when the start room
  or the exit has no tunnel.
* `amazed.robots`:
  * `init_robots(count, start)` creates the robots.
  * `move_robots(rooms, robots, start, out)` plays the turns. It raises
    `NoPathError` when the robots cannot get through.
  * `is_valid(rooms, start)` performs the check on the start room's
    neighbours.
  * `format_rooms` and `format_robots` produce text dumps for debugging.