"""Two-player snakes and ladders on a 100-square board."""

from __future__ import annotations

import os
import random
import subprocess
from collections.abc import Callable, Iterator
from dataclasses import dataclass

FINAL_SQUARE = 100
DIE_FACES = 6

JUMPS: dict[int, int] = {
    # ladders
    1: 38,
    4: 14,
    9: 31,
    21: 42,
    28: 84,
    51: 67,
    71: 91,
    80: 100,
    # snakes
    17: 7,
    54: 34,
    62: 19,
    64: 60,
    87: 24,
    93: 73,
    95: 75,
    98: 79,
}

_BORDER = "+-----------------------------------------------------+\n"
_DIVIDER = "|-----------------------------------------------------|\n"


@dataclass(frozen=True)
class Jump:
    """A ladder or snake taken from ``start`` to ``end``."""

    start: int
    end: int

    @property
    def is_ladder(self) -> bool:
        return self.end > self.start

    def message(self, player: int) -> str:
        if self.is_ladder:
            return f"\nPlayer {player} has Hit a Ladder!\n"
        return f"\nPlayer {player} got Bit a Snake!\n"


def correct_square(square: int) -> int:
    """Return where a piece landing on ``square`` ends up."""
    return JUMPS.get(square, square)


def _square_at(row: int, col: int) -> int:
    if row % 2 == 0:
        return row * 10 + col + 1
    return row * 10 + (9 - col) + 1


def render_board(pos1: int, pos2: int) -> str:
    """Draw the board with both players' pieces."""
    rows = []
    for row in range(9, -1, -1):
        cells = []
        for col in range(10):
            num = _square_at(row, col)
            if pos1 == num and pos2 == num:
                cells.append(" [B] ")
            elif pos1 == num:
                cells.append(" [O] ")
            elif pos2 == num:
                cells.append(" [X] ")
            else:
                cells.append(f" {num:3d} ")
        rows.append("|" + "".join(cells) + "\t|\n")
    return "\n" + _BORDER + _DIVIDER.join(rows) + _BORDER


def render_scoreboard(score1: int, score2: int) -> str:
    """Draw both scores and who is ahead."""
    if score1 > score2:
        leader = "  Leader     : Player 1 [O] \n"
    elif score2 > score1:
        leader = "  Leader     : Player 2 [X] \n"
    else:
        leader = "  It's a tie right now!\n"
    return (
        "\n================== SCOREBOARD ==================\n"
        f" Player 1 [O]  : {score1:3d}\n"
        f" Player 2 [X]  : {score2:3d}\n"
        + leader
        + "=================================================\n"
    )


@dataclass
class SnakesGame:
    """Positions of the two players."""

    score1: int = 0
    score2: int = 0

    def take_turn(self, player: int, roll: int) -> Jump | None:
        """Move ``player`` by ``roll``; return the jump taken, if any."""
        if player not in (1, 2):
            raise ValueError("player must be 1 or 2")
        if not 1 <= roll <= DIE_FACES:
            raise ValueError(f"roll must be between 1 and {DIE_FACES}")
        landed = (self.score1 if player == 1 else self.score2) + roll
        jump = Jump(landed, JUMPS[landed]) if landed in JUMPS else None
        position = min(correct_square(landed), FINAL_SQUARE)
        if player == 1:
            self.score1 = position
        else:
            self.score2 = position
        return jump

    @property
    def over(self) -> bool:
        return self.score1 >= FINAL_SQUARE or self.score2 >= FINAL_SQUARE

    def winner(self) -> int | None:
        if self.score1 >= FINAL_SQUARE:
            return 1
        if self.score2 >= FINAL_SQUARE:
            return 2
        return None


def _characters(read: Callable[[], str]) -> Iterator[str]:
    while True:
        for ch in read():
            if not ch.isspace():
                yield ch


def play(
    rng: random.Random,
    read: Callable[[], str],
    write: Callable[[str], object],
    clear: Callable[[], object],
) -> int | None:
    """Run the game until someone reaches the last square; return the winner."""
    game = SnakesGame()
    keys = _characters(read)
    while not game.over:
        clear()
        write(render_board(game.score1, game.score2))
        write(render_scoreboard(game.score1, game.score2))

        write("\nClick Player 1")
        next(keys)
        dice = rng.randint(1, DIE_FACES)
        jump = game.take_turn(1, dice)
        if jump:
            write(jump.message(1))
        write(f"\nDice: {dice} \n")

        dice = rng.randint(1, DIE_FACES)
        write("\nClick Player 2\n")
        next(keys)
        jump = game.take_turn(2, dice)
        if jump:
            write(jump.message(2))
        write(f"\nDice: {dice}\n")

    winner = game.winner()
    if winner == 1:
        write("\n Player 1 [O] wins!\n")
    elif winner == 2:
        write("\n Player 2 [X] wins!\n")
    return winner


def _clear_screen() -> None:
    subprocess.run("cls" if os.name == "nt" else "clear", shell=True, check=False)


def main(argv: list[str] | None = None) -> int:
    try:
        play(
            random.Random(),
            input,
            lambda text: print(text, end="", flush=True),
            _clear_screen,
        )
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())