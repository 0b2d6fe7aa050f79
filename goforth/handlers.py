"""The built-in commands: moving, looking, taking, dropping and quitting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from goforth.commands import CommandRegistry, Handler, QuitGame
from goforth.direction import Direction
from goforth.world import RoomNotFoundError

if TYPE_CHECKING:
    from goforth.entities import Room
    from goforth.game import Game


def _current_room(game: Game) -> Room:
    room_id = game.player.current_room
    room = game.world.room_by_id(room_id)
    if room is None:
        raise RoomNotFoundError(room_id)
    return room


def look_handler(args: list[str], game: Game) -> None:
    """Print the current room's description and its exits."""
    room = _current_room(game)
    print(room.description)
    print("Exits:")
    for direction in room.exits:
        print(f"  {direction}")


def go_handler(args: list[str], game: Game) -> None:
    """Move the player through the exit named by the first argument."""
    if not args:
        print("go where?")
        return
    room = _current_room(game)
    target = room.exits.get(args[0])
    if target is None:
        print(f"you can't go {args[0]}")
        return
    game.player.move_to(target)


def take_handler(args: list[str], game: Game) -> None:
    """Move the named object from the current room to the player."""
    if not args:
        print("take what?")
        return
    room = _current_room(game)
    wanted = args[0]
    if any(obj.id == wanted for obj in game.world.objects_in_room(room.id)):
        game.world.move_object_to_player(wanted)
        return
    print(f'there is no "{wanted}" here')


def drop_handler(args: list[str], game: Game) -> None:
    """Move the named object from the player to the current room."""
    if not args:
        print("drop what?")
        return
    room = _current_room(game)
    wanted = args[0]
    if not game.world.player_has_object(wanted):
        print(f'you don\'t own "{wanted}"')
        return
    game.world.place_object(wanted, room.id)


def inventory_handler(args: list[str], game: Game) -> None:
    """List the objects the player carries."""
    objects = game.world.player_inventory()
    if not objects:
        print("nothing in the inventory")
        return
    print("Inventory:")
    for obj in objects:
        print(f"  {obj.name}")


def quit_handler(args: list[str], game: Game) -> None:
    """End the game."""
    raise QuitGame()


def _go_towards(direction: Direction) -> Handler:
    def handler(args: list[str], game: Game) -> None:
        go_handler([direction.value], game)

    return handler


_ALIASES = {
    "n": Direction.NORTH,
    "north": Direction.NORTH,
    "s": Direction.SOUTH,
    "south": Direction.SOUTH,
    "w": Direction.WEST,
    "west": Direction.WEST,
    "e": Direction.EAST,
    "east": Direction.EAST,
    "u": Direction.UP,
    "up": Direction.UP,
    "d": Direction.DOWN,
    "down": Direction.DOWN,
}


def register_default_handlers(registry: CommandRegistry) -> None:
    """Register the built-in commands and the direction shortcuts."""
    for alias, direction in _ALIASES.items():
        registry.register(alias, _go_towards(direction))
    registry.register("go", go_handler)
    registry.register("look", look_handler)
    registry.register("take", take_handler)
    registry.register("drop", drop_handler)
    registry.register("inventory", inventory_handler)
    registry.register("quit", quit_handler)