"""Read a maze of rooms and tunnels and move numbered robots from start to exit."""

__version__ = "1.0.0"