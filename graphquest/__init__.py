"""A console treasure-hunt game through a labyrinth of rooms, with its CSV and container helpers."""

__version__ = "1.0.0"

__all__ = ["csvutil", "containers", "labyrinth", "game"]