# nyanburger

A small arcade game for the terminal. You are a cheeseburger (`B`) at the
bottom of a 50 by 25 playing field. Nyan Cats (`N`) fall from the top, and
power-ups and friends drift down with them. Dodge the cats, catch the rest,
and try to beat your high score.

## Installing

```
pip install .
```

The game reads keys and draws through `blessed`, which is installed with it.

## Playing

```
nyanburger
```

Options:

- `--highscore PATH`: the file the best score is kept in (default
  `highscore.txt` in the current directory)
- `--seed N`: seed for the random placement of objects

A menu appears; type a number and press Enter:

1. Start Game: plays until the cheeseburger has no lives left, then returns to
   the menu
2. Display Score: shows the best score saved so far, or
   "No highscore data found!" when the file does not exist yet
3. Replay game: resets lives, score, speed, shield and level, sends the cats
   back to the top, and takes the power-ups and friends off the field
4. Game Instructions and rules
5. Team members
6. Exit

Any other input prints "Invalid choice. Please try again." During play the
left and right arrow keys move the cheeseburger one column, within the edges
of the field.

### What is on the field

- **Nyan Cats** (`N`) each have a level from 0 to 4 that sets how many rows
  they fall per frame (1, 1, 2, 2, 3). Running into one costs a life, but only
  once your score is above 0, and only when no shield is up. A cat that leaves
  the bottom, or that hits you, comes back at the top in a random column;
  cats of higher level are more often invisible when they do.
- **Power-ups** are caught by standing on the same cell. Each gives 5 points
  and is then gone for good. By kind:
  - `s` Shield: a shield that turns aside hits for the rest of that frame; it
    wears off at the start of the next one
  - `S` Speed and `/` Score: no effect beyond the 5 points
- **Friends** are caught on the same row within one column. Each catch gives
  10 points and, by the friend's support level 1, 2 or 3, that many extra
  lives. A friend is drawn as `FF`, `FFF` or `FFFF` accordingly.

While your score is above 100 and below 300, the level shown on the status
line rises by one every frame.

### High score

After every frame the current score is compared with the one in the high
score file; the file is created if missing and rewritten when the score is
higher.

## Using it from Python

The game takes its output stream and key presses from a `Console`, so it can
be driven without a terminal:

```python
import io
import random

from nyanburger.console import Console
from nyanburger.game import Game

out = io.StringIO()
game = Game(Console(out, keys=[]), random.Random(1), "scores.txt")
game.start(["3", "6"])          # replay, then exit
print(out.getvalue())
```

`nyanburger.highscore` offers `load_high_score(path)`,
`save_high_score(path, score)` and `record_score(path, score)` for the score
file on its own.

## Limitations

- There is no pause during play. `Game.handle_user_input` (ESC pauses, the
  next key resumes) exists, but the play loop does not call it; an ESC press
  while playing is ignored, although the instructions screen mentions it.
- The cheeseburger's speed grows every frame but does not change how it moves.
- Once caught, or after Replay, power-ups do not come back.

## Running the tests

```
pip install .[test]
pytest
```