# lifegrid

lifegrid opens a window for playing with Life-like cellular automata on a
64 × 64 grid. You can start from a random grid or from a pattern file. You can
pause the simulation, paint cells with the mouse and switch between rule sets
while it runs.

## Installing

```
pip install .
```

This also installs `pygame`. To install the test tools too, use
`pip install .[test]`.

## Running

Start with a random grid:

```
lifegrid
```

Start from a pattern file:

```
lifegrid glider.txt
```

If the file cannot be read or does not fit the board, the grid is filled at
random instead. The game always starts paused. Press SPACE to start it.
Messages and the help text go to standard output.

## Pattern files

Each line of the file is one row of the grid. The byte `0` is a dead cell and
any other byte is a live cell. A pattern with more rows or columns than the
board is rejected. Here is a glider:

```
0000000000000000
0000100000000000
0000010000000000
0001110000000000
```

## Controls

| Key / action   | Effect                                           |
|----------------|--------------------------------------------------|
| SPACE          | Pause or resume the simulation                   |
| R              | Reload the pattern file, if one was loaded, and pause |
| C              | Clear the board and pause                        |
| G              | Fill the board at random and pause               |
| T              | Switch to the next rule set                      |
| H              | Print the help text                              |
| ESC / Q        | Quit                                             |
| Mouse click    | Set a cell alive (when paused)                   |
| Mouse drag     | Paint live cells (when paused)                   |
| Ctrl + drag    | Paint dead cells (when paused)                   |

## Rule sets

Press T to move through these rule sets in order:

- Conway's Life (B3/S23), the default
- HighLife (B36/S23)
- Day & Night (B3678/S34678)
- Maze (B3/S12345)

The functions `conway()`, `highlife()`, `day_night()` and `maze()` in
`lifegrid.rules` return these rule sets.

## Using it as a library

```python
from lifegrid.board import Board
from lifegrid.rules import conway

board = Board(8, 8)
board[1, 2] = True
board[2, 3] = True
board[3, 1] = board[3, 2] = board[3, 3] = True

nxt = board.next(conway())
print(nxt.render())
print(sorted(nxt.alive_cells()))
```

- `Board(height, width)` is a grid of dead cells. Cells are read and written
  as `board[row, col]`. A position off the board raises `IndexError`. The
  edges do not wrap, so a cell on an edge has fewer neighbours.
- `board.next(rules)` returns the next generation as a new board.
  `board.next_into(out, rules)` writes it into `out` and raises `BoardError`
  if the sizes differ.
- `board.random_fill(rng=None)` makes each cell alive with a one-in-five
  chance. You can pass a `random.Random` to get repeatable results.
  `board.clear()` kills every cell.
- `board.load(path)` reads a pattern file. It raises `BoardError` if the file
  cannot be read or does not fit.
- `board.render()` returns the grid as text, two characters per cell.
  `board.print()` writes that text to standard output.
- `make_rules(name, birth_counts, survival_counts)` builds your own rule set.
  Neighbour counts outside 0–8 are ignored, and names are cut to 63
  characters. `rules.apply(alive, neighbor_count)` gives a cell's next state,
  and `rules.describe()` returns a readable summary.

## What it does not do

lifegrid cannot save the board to a file. Patterns can only be loaded, and
only in the plain `0`/non-`0` format described above. The board size is fixed
at 64 × 64 when you run the `lifegrid` command.