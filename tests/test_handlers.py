import pytest

from goforth.commands import CommandRegistry, QuitGame
from goforth.direction import Direction
from goforth.entities import GameObject, Room
from goforth.game import Game
from goforth.handlers import (
    drop_handler,
    go_handler,
    inventory_handler,
    look_handler,
    quit_handler,
    register_default_handlers,
    take_handler,
)
from goforth.parser import Command
from goforth.player import Player
from goforth.world import RoomNotFoundError, World


def setup_game():
    rooms = {"entrance": "Entrance", "dining": "Dining room"}
    objects = {
        "sword": "Sword",
        "shield": "Shield",
        "key": "Dwarven key",
        "potion": "Health potion",
        "mana": "Mana potion",
    }
    world = World()
    for room_id, description in rooms.items():
        world.add_room(Room(room_id, description))
    for object_id, name in objects.items():
        world.add_object(GameObject(object_id, name))
    world.connect_rooms_bidirectional("entrance", Direction.NORTH, "dining")
    registry = CommandRegistry()
    register_default_handlers(registry)
    game = Game(world, Player("entrance"), registry)
    game.world.place_object("sword", "entrance")
    return game


@pytest.mark.parametrize(
    "handler, args",
    [
        (look_handler, []),
        (go_handler, ["north"]),
        (take_handler, ["sword"]),
        (drop_handler, ["sword"]),
    ],
)
def test_handlers_raise_on_invalid_room(handler, args):
    game = setup_game()
    game.player.move_to("wrong-room")
    with pytest.raises(RoomNotFoundError) as excinfo:
        handler(args, game)
    assert excinfo.value.id == "wrong-room"


def test_go_handler():
    game = setup_game()
    go_handler(["north"], game)
    assert game.player.current_room == "dining"


def test_go_handler_invalid_direction(capsys):
    game = setup_game()
    go_handler(["sideways"], game)
    assert game.player.current_room == "entrance"
    assert capsys.readouterr().out == "you can't go sideways\n"


def test_go_handler_without_args(capsys):
    game = setup_game()
    go_handler([], game)
    assert game.player.current_room == "entrance"
    assert capsys.readouterr().out == "go where?\n"


def test_take_handler():
    game = setup_game()
    game.world.place_object("sword", "entrance")
    take_handler(["sword"], game)
    assert game.world.player_has_object("sword")


def test_take_handler_missing_object(capsys):
    game = setup_game()
    take_handler(["shield"], game)
    assert not game.world.player_has_object("shield")
    assert capsys.readouterr().out == 'there is no "shield" here\n'


def test_drop_handler():
    game = setup_game()
    game.world.move_object_to_player("sword")
    drop_handler(["sword"], game)
    assert not game.world.player_has_object("sword")
    assert any(obj.id == "sword" for obj in game.world.objects_in_room("entrance"))


def test_drop_handler_not_owned(capsys):
    game = setup_game()
    drop_handler(["key"], game)
    assert game.world.objects_in_room("entrance")[0].id == "sword"
    assert capsys.readouterr().out == 'you don\'t own "key"\n'


def test_look_handler_prints_description_and_exits(capsys):
    game = setup_game()
    look_handler([], game)
    assert capsys.readouterr().out == "Entrance\nExits:\n  north\n"


def test_inventory_handler_empty(capsys):
    game = setup_game()
    inventory_handler([], game)
    assert capsys.readouterr().out == "nothing in the inventory\n"


def test_inventory_handler_lists_names(capsys):
    game = setup_game()
    game.world.move_object_to_player("key")
    inventory_handler([], game)
    assert capsys.readouterr().out == "Inventory:\n  Dwarven key\n"


def test_quit_handler_raises_quit():
    game = setup_game()
    with pytest.raises(QuitGame):
        quit_handler([], game)


@pytest.mark.parametrize("alias", ["n", "north"])
def test_direction_aliases_move_player(alias):
    game = setup_game()
    game.registry.dispatch(Command(name=alias), game)
    assert game.player.current_room == "dining"


def test_alias_back_returns_player():
    game = setup_game()
    game.registry.dispatch(Command(name="n"), game)
    game.registry.dispatch(Command(name="s"), game)
    assert game.player.current_room == "entrance"