# graphquest

A small console game. You walk through a labyrinth of rooms, pick up items
that are worth points, and try to reach the final room before your time
runs out. The game's prompts and messages are in Spanish.

## Installing

```
pip install .
```

## Playing

Put a file named `graphquest.csv` in the current directory and run:

```
graphquest
```

or name another labyrinth file as the first argument:

```
graphquest mi_laberinto.csv
```

The main menu offers three choices:

1. Load the labyrinth from the CSV file
2. Start a game
3. Quit

A game can only be started after a labyrinth has been loaded. If the file
cannot be opened or is malformed, an error is written to standard error and
the menu is shown again.

Inside a game you can:

1. pick up items from the current room,
2. drop items from your inventory,
3. move with `W`, `A`, `S` or `D` (either case),
4. restart, which empties your inventory and puts the rooms and items back
   as they were when the game began,
5. leave the game.

You start with 10 units of time. Each item you pick up or drop costs 1.
Each move costs `ceil((carried weight + 1) / 10)`. The game ends when you
reach a final room, when your time runs out, or when input ends. Reaching a
final room shows your final score and the items you collected.

## The labyrinth file

The first line is a header and is skipped. Each line after it describes one
room in nine comma-separated fields. A field may be put in double quotes
when it contains commas; inside quotes, `""` stands for a literal quote:

| field | meaning |
|-------|---------|
| 1 | room id (0–255) |
| 2 | name |
| 3 | description |
| 4 | items, separated by `;`, each written as `name,value,weight` |
| 5–8 | id of the room above, below, left and right, or `-1` for none |
| 9 | `Si` or `si` if this is a final room |

Example:

```
ID,Nombre,Descripcion,Items,Arriba,Abajo,Izquierda,Derecha,EsFinal
1,Entrada,Una puerta vieja,"Llave,5,1;Moneda,3,2",-1,2,-1,-1,No
2,Salida,La luz del dia,,1,-1,-1,-1,Si
```

The game starts in the room with the lowest id. When two rows share an id,
the later one wins.

## Using it as a library

```python
from graphquest.labyrinth import (
    Direction, Labyrinth, MoveOutcome, Player, collect_item, move,
)

labyrinth = Labyrinth.load("graphquest.csv")
player = Player()
room = labyrinth.initial_room()
collect_item(player, room, 0)          # raises IndexError if there is no such item
room, outcome = move(player, room, labyrinth, Direction.from_key("s"))
if outcome is MoveOutcome.REACHED_FINAL:
    print("final score:", player.score)
```

- `graphquest.labyrinth` holds `Item`, `Room`, `Player`, `Labyrinth`,
  `Direction`, `MoveOutcome` and the functions `move`, `move_cost`,
  `collect_item` and `discard_item`. `Labyrinth.from_rows` builds a
  labyrinth from already-parsed rows and `Labyrinth.copy` makes a deep copy.
- `graphquest.game` holds `Game`, which plays one game over any pair of
  text streams, and `main`, the command above.
- `graphquest.csvutil` provides `parse_csv_line`, `read_csv_rows`,
  `split_string`, `clear_screen` and `wait_for_key_press`.
- `graphquest.containers` provides `MaxHeap` (a max-priority queue whose
  `pop` returns the removed element and raises `IndexError` when empty),
  `Map` (pairs kept in insertion order, or in key order when given a
  `lower_than` comparison; `insert_multi` allows repeated keys) and `Set`.

## Running the tests

```
pip install .[test]
pytest
```