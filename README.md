# minigames

Three small games to play in a terminal. No libraries are needed beyond Python 3.10 or later.

## Installing

```
pip install .
```

## Playing

### Hangman

```
minigames-hangman
```

The game picks one of three words at random and shows its hint. Type one letter at a time. Spaces and blank lines are skipped, and upper-case letters count as lower-case. A correct letter shows up wherever it appears in the word. A wrong letter adds a part to the gallows and reduces the tries left. You lose after six misses. You win once every letter is revealed.

### Snakes and ladders

```
minigames-snakes
```

Two players, `[O]` and `[X]`, play on a 100-square board. Each time the board and scoreboard are shown, each player rolls in turn. To roll, type any key and press Enter. Ladders carry a player up and snakes bring a player down, and a message says which was hit. Positions above 100 are capped at 100. The game ends when a player reaches 100, and that player wins. A square that both players share is shown as `[B]`. Before each round the screen is cleared with the system's `clear` command, or `cls` on Windows.

### Rock, paper, scissors

```
minigames-rps
```

The title menu offers `1` to play and `2` to exit. Any other answer shows the menu again. After choosing to play, pick one of:

- `1` rock
- `2` paper
- `3` scissors
- `4` exit

Any other number counts as scissors. One round is played against a random computer move. The screen is cleared and the result and scoreboard are printed, and then the game ends.

In all three games, end of input or Ctrl+C quits quietly.

## Using the games from code

Each module keeps its rules apart from its terminal loop.

`minigames.hangman` provides:

- `WordWithHint`
- the `WORDS` list
- `Hangman`, with `guess`, `display`, `tries_left`, `solved` and `lost`
- `draw_hangman(depth)`, which returns the gallows drawn up to part `depth`, from 0 to 5

`minigames.snakes` provides:

- `JUMPS`, which maps a square to the square its ladder or snake leads to
- `correct_square`
- `Jump`
- `SnakesGame`, with `take_turn(player, roll)`, `over` and `winner()`
- `render_board` and `render_scoreboard`

`minigames.rps` provides:

- `Move`
- `Outcome`
- `judge(user, computer)`
- `Scoreboard`, with `record`
- `render_round`

Each module also has a `play` function that takes its input, output and (for snakes and rps) random source and screen-clearing callable as arguments. This lets a whole game run from a script or a test:

```python
import random
from minigames import snakes

lines = iter(["r"] * 1000)
winner = snakes.play(random.Random(1), lambda: next(lines), lambda s: None, lambda: None)
```

## What it does not do

- Scores are not saved between runs.
- Rock, paper, scissors plays a single round per run.
- There is no computer opponent in snakes and ladders: both players are driven from the same keyboard.

## Running the tests

```
pip install .[test]
pytest
```