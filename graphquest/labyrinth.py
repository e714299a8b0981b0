"""Rooms, items and the player of the labyrinth, and the moves they allow."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

from .csvutil import read_csv_rows, split_string

MAX_ROOMS = 256
INITIAL_TIME = 10
NO_EXIT = -1
FINAL_MARKS = ("Si", "si")

_FIELD_COUNT = 9
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def _atoi(text: str) -> int:
    """Read the leading integer of ``text``; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


@dataclass
class Item:
    """Something a player can carry: it adds to the score and to the load."""

    name: str
    value: int
    weight: int


@dataclass
class Room:
    """One room of the labyrinth and the ids of its neighbours."""

    id: int
    name: str
    description: str
    items: list[Item] = field(default_factory=list)
    up: int = NO_EXIT
    down: int = NO_EXIT
    left: int = NO_EXIT
    right: int = NO_EXIT
    is_final: bool = False


@dataclass
class Player:
    """Score, remaining time and inventory of the player."""

    score: int = 0
    remaining_time: int = INITIAL_TIME
    items: list[Item] = field(default_factory=list)

    def total_weight(self) -> int:
        """Sum of the weights of the carried items."""
        return sum(item.weight for item in self.items)

    def reset(self) -> None:
        """Empty the inventory and restore score and time to their start values."""
        self.items.clear()
        self.score = 0
        self.remaining_time = INITIAL_TIME


class Direction(Enum):
    """A way out of a room, keyed by the WASD letters."""

    UP = "w"
    DOWN = "s"
    LEFT = "a"
    RIGHT = "d"

    @classmethod
    def from_key(cls, key: str) -> Direction:
        """Return the direction for a single WASD letter of either case."""
        if len(key) == 1:
            for direction in cls:
                if key.lower() == direction.value:
                    return direction
        raise ValueError(f"not a direction key: {key!r}")


class MoveOutcome(Enum):
    """What happened when the player tried to move."""

    MOVED = "moved"
    BLOCKED = "blocked"
    NO_ROOM = "no_room"
    OUT_OF_TIME = "out_of_time"
    REACHED_FINAL = "reached_final"


def _parse_item(text: str) -> Item:
    parts = split_string(text, ",")
    if len(parts) < 3:
        raise ValueError(f"malformed item: {text!r}")
    return Item(parts[0], _atoi(parts[1]), _atoi(parts[2]))


def _parse_room(fields: Sequence[str]) -> Room:
    if len(fields) < _FIELD_COUNT:
        raise ValueError(f"expected {_FIELD_COUNT} fields, got {len(fields)}")
    return Room(
        id=_atoi(fields[0]),
        name=fields[1],
        description=fields[2],
        items=[_parse_item(text) for text in split_string(fields[3], ";")],
        up=_atoi(fields[4]),
        down=_atoi(fields[5]),
        left=_atoi(fields[6]),
        right=_atoi(fields[7]),
        is_final=fields[8] in FINAL_MARKS,
    )


class Labyrinth:
    """The rooms of a labyrinth, indexed by id."""

    def __init__(self, rooms: Iterable[Room] = ()) -> None:
        self.rooms: dict[int, Room] = {}
        for room in rooms:
            if not 0 <= room.id < MAX_ROOMS:
                raise ValueError(f"room id out of range: {room.id}")
            self.rooms[room.id] = room

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> Labyrinth:
        """Build a labyrinth from CSV data rows; a later row replaces an equal id."""
        by_id: dict[int, Room] = {}
        for fields in rows:
            if not fields:
                continue
            room = _parse_room(fields)
            by_id[room.id] = room
        return cls(by_id.values())

    @classmethod
    def load(cls, path: str | Path) -> Labyrinth:
        """Read a labyrinth from a CSV file whose first line is a header."""
        with open(path, encoding="utf-8") as stream:
            rows = read_csv_rows(stream, ",")
            next(rows, None)
            return cls.from_rows(rows)

    def copy(self) -> Labyrinth:
        """Return a deep copy that shares no rooms or items with this one."""
        return Labyrinth(
            replace(room, items=[replace(item) for item in room.items])
            for room in self.rooms.values()
        )

    def initial_room(self) -> Room | None:
        """The room with the lowest id, or None when there are no rooms."""
        if not self.rooms:
            return None
        return self.rooms[min(self.rooms)]

    def room(self, room_id: int) -> Room | None:
        """The room with ``room_id``, or None."""
        return self.rooms.get(room_id)

    def __len__(self) -> int:
        return len(self.rooms)


def move_cost(weight: int) -> int:
    """Time spent moving while carrying ``weight``: one unit per started ten."""
    return -(-(weight + 1) // 10)


def move(
    player: Player, room: Room, labyrinth: Labyrinth, direction: Direction
) -> tuple[Room, MoveOutcome]:
    """Try to leave ``room`` in ``direction``; return the room the player ends in."""
    target = getattr(room, direction.name.lower())
    if target == NO_EXIT:
        return room, MoveOutcome.BLOCKED
    new_room = labyrinth.room(target)
    if new_room is None:
        return room, MoveOutcome.NO_ROOM

    player.remaining_time -= move_cost(player.total_weight())
    if player.remaining_time <= 0:
        return room, MoveOutcome.OUT_OF_TIME
    if new_room.is_final:
        return new_room, MoveOutcome.REACHED_FINAL
    return new_room, MoveOutcome.MOVED


def collect_item(player: Player, room: Room, index: int) -> Item:
    """Move the item at ``index`` from the room to the player; costs one time unit."""
    if not 0 <= index < len(room.items):
        raise IndexError(f"no item at position {index}")
    item = room.items.pop(index)
    player.items.append(item)
    player.score += item.value
    player.remaining_time -= 1
    return item


def discard_item(player: Player, index: int) -> Item:
    """Drop the item at ``index`` from the inventory; costs one time unit."""
    if not 0 <= index < len(player.items):
        raise IndexError(f"no item at position {index}")
    item = player.items.pop(index)
    player.remaining_time -= 1
    return item