"""A small playable castle, read from standard input."""

from __future__ import annotations

import argparse
import sys

from goforth.commands import CommandRegistry
from goforth.direction import Direction
from goforth.entities import GameObject, Room
from goforth.game import Game
from goforth.handlers import register_default_handlers
from goforth.player import Player
from goforth.world import (
    InvalidObjectError,
    InvalidRoomError,
    ObjectNotFoundError,
    RoomNotFoundError,
    World,
)

_GAME_ERRORS = (
    InvalidRoomError,
    InvalidObjectError,
    RoomNotFoundError,
    ObjectNotFoundError,
)


def build_game() -> Game:
    """Create the demo world with four rooms and two objects."""
    world = World()
    registry = CommandRegistry()
    register_default_handlers(registry)

    world.add_room(Room("entrance", "Main entrance"))
    world.add_room(Room("dining", "Dining room"))
    world.add_room(Room("sport", "Sport room"))
    world.add_room(Room("library", "Library room"))
    world.add_object(GameObject("sword", "An elven sword"))
    world.add_object(GameObject("key", "A magic key"))
    world.connect_rooms_bidirectional("entrance", Direction.NORTH, "dining")
    world.connect_rooms_bidirectional("dining", Direction.WEST, "sport")
    world.connect_rooms_bidirectional("dining", Direction.NORTH, "library")
    world.place_object("sword", "library")
    world.place_object("key", "sport")
    return Game(world, Player("entrance"), registry)


def main(argv: list[str] | None = None) -> int:
    """Play the demo game on standard input; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="goforth", description="Play a small text adventure."
    )
    parser.parse_args(argv)
    try:
        build_game().run(sys.stdin)
    except _GAME_ERRORS as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())