import io

from amazed.cli import EXIT_ERROR, EXIT_SUCCESS, main, run

SIMPLE = (
    "3\n"
    "##start\n"
    "a 0 0\n"
    "b 1 1\n"
    "##end\n"
    "c 2 2\n"
    "a-b\n"
    "b-c\n"
)


def _run(text):
    out, err = io.StringIO(), io.StringIO()
    code = run(io.StringIO(text), out, err)
    return code, out.getvalue(), err.getvalue()


def test_main_rejects_arguments():
    assert main(["extra"]) == EXIT_ERROR


def test_simple_maze_output():
    code, out, err = _run(SIMPLE)
    assert code == EXIT_SUCCESS
    assert err == ""
    assert out == (
        "#number_of_robots\n3\n#rooms\n##start\na 0 0\nb 1 1\n"
        "##end\nc 2 2\n#tunnels\na-b\nb-c\n"
        "P1-b \nP1-c P2-b \nP2-c P3-b \nP3-c \n"
    )


def test_every_robot_reaches_exit_once():
    code, out, _ = _run(SIMPLE)
    assert code == EXIT_SUCCESS
    for number in (1, 2, 3):
        assert out.count(f"P{number}-c ") == 1


def test_invalid_input_fails_silently():
    code, out, err = _run("0\n")
    assert code == EXIT_ERROR
    assert err == ""


def test_empty_input_fails():
    code, _, _ = _run("")
    assert code == EXIT_ERROR


def test_start_without_tunnel_reports_on_stderr():
    text = "1\n##start\ns 0 0\n##end\ne 1 1\nm 2 2\nm-e\n"
    code, _, err = _run(text)
    assert code == EXIT_ERROR
    assert err == "There is no valid path from start to exit.\n"


def test_dead_end_maze_reports_on_stdout():
    text = (
        "1\n##start\ns 0 0\nd 1 1\n##end\ne 2 2\nm 3 3\n"
        "s-d\ne-m\n"
    )
    code, out, err = _run(text)
    assert code == EXIT_ERROR
    assert err == ""
    assert out.endswith("There is no valid path from start to exit\n")