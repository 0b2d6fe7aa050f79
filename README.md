# goforth

A small engine for building text adventure games. It provides a world made
of rooms and objects, a player who moves between rooms, a parser for typed
commands, and a registry that sends each command to a handler.

## Installation

```
pip install goforth
```

For running the tests:

```
pip install "goforth[test]"
pytest
```

## Trying the demo

The package comes with a small demo world. It has four rooms: the
entrance, the dining room north of it, a sport room west of the dining
room and a library north of the dining room. There is a sword in the
library and a key in the sport room. Start it with:

```
goforth-demo
```

or `python -m goforth.demo`. Type one command per line on standard input.
The game ends at `quit` or at the end of input. The demo understands these
commands:

- `look`: print the description of the current room and list its exits
- `go <direction>`: move through an exit (`north`, `south`, `east`,
  `west`, `up`, `down`). The full direction names and the shortcuts `n`,
  `s`, `e`, `w`, `u` and `d` also work as commands on their own
- `take <object>`: pick up an object in the current room, by its id
- `drop <object>`: put down an object you carry, by its id
- `inventory`: list the names of the objects you carry
- `quit`: leave the game

Input is not case-sensitive, and extra whitespace is ignored. An unknown
command prints `I don't know how to do that.`

## Building your own game

```python
import sys

from goforth.commands import CommandRegistry
from goforth.direction import Direction
from goforth.entities import GameObject, Room
from goforth.game import Game
from goforth.handlers import register_default_handlers
from goforth.player import Player
from goforth.world import World

world = World()
world.add_room(Room("hall", "A draughty hall"))
world.add_room(Room("cellar", "A damp cellar"))
world.add_object(GameObject("lamp", "An old oil lamp"))
world.connect_rooms_bidirectional("hall", Direction.DOWN, "cellar")
world.place_object("lamp", "hall")

registry = CommandRegistry()
register_default_handlers(registry)

game = Game(world, Player("hall"), registry)
game.run(sys.stdin)
```

`Game.run` accepts any iterable of lines, so a list of strings works as
well as a file:

```python
game.run(["take lamp", "down", "drop lamp", "quit"])
assert game.player.current_room == "cellar"
assert not world.player_has_object("lamp")
```

### The pieces

- `goforth.direction.Direction`: an enumeration of the six directions.
  `Direction.opposite()` gives the reverse one.
- `goforth.entities.Room` (`id`, `description`, `exits`) and
  `goforth.entities.GameObject` (`id`, `name`).
- `goforth.player.Player`: holds `current_room` and changes it with
  `move_to()`. It does not check that the room exists.
- `goforth.parser.parse()`: turns a line into a `Command` with a `name`
  and a list of `args`. A blank line gives a command with an empty name.
- `goforth.world.World`: registers rooms and objects, connects rooms one
  way (`connect_rooms`) or both ways (`connect_rooms_bidirectional`), and
  tracks where each object is (`place_object`, `move_object_to_room`,
  `move_object_to_player`, `objects_in_room`, `player_inventory`,
  `player_has_object`). `room_by_id` and `object_by_id` return `None`
  for unknown ids.
- `goforth.handlers`: the built-in handlers (`look_handler`,
  `go_handler`, `take_handler`, `drop_handler`, `inventory_handler`,
  `quit_handler`) and `register_default_handlers()`, which registers them
  together with the direction shortcuts.

### Custom commands

A handler is any callable that takes the command's arguments and the game:

```python
def shout(args, game):
    print(" ".join(args).upper() + "!")

registry.register("shout", shout)
```

Registering under an empty name does nothing. Registering under a name
that is already taken replaces the old handler.

To end the game, a handler raises `goforth.commands.QuitGame`.
`Game.run` treats that as a normal finish. Any other exception stops the
loop and goes to the caller.

### Errors

`World` raises these exceptions, all defined in `goforth.world`:

- `InvalidRoomError` and `InvalidObjectError` (subclasses of `ValueError`)
  when a room or an object has an empty id
- `RoomNotFoundError` and `ObjectNotFoundError` (subclasses of
  `LookupError`) when an id is unknown. Each one has an `id` attribute that
  holds the id that was looked up

The built-in handlers raise `RoomNotFoundError` if the player stands in a
room that the world does not know. The demo prints any of these errors to
standard error and exits with status 1.

## What it does not do

goforth runs one player against one input stream. It has no network
server, so several players cannot share a world. It does not save or load
games, and worlds are built in Python code rather than read from data
files.