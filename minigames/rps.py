"""Rock, paper, scissors against the computer."""

from __future__ import annotations

import os
import random
import subprocess
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum

EXIT_CHOICE = 4

_RULE = "\n------------------------\n"
_THANKS = (
    "\n------------------------\n"
    "|Thanks For Playing|\n"
    "|----------------------|\n"
    "PRESS CTRL+C TO QUIT"
)
_TITLE = (
    "====================================\n"
    "     ROCK || PAPER || SCISSORS \n"
    "====================================\n\n"
    "1. PLAY \n"
    "2. EXIT \t"
)
_MENU = (
    "\n------------------------\n"
    "|1.ROCK|\n"
    "|*************************|\n"
    "|2. PAPER|\n"
    "|*************************|\n"
    "|3. SCISSOR|\n"
    "|*************************|\n"
    "|4.EXIT|\n"
    "|-------------------------|\n"
    "|ENTER YOUR CHOICE: \t|"
)


class Move(Enum):
    ROCK = 1
    PAPER = 2
    SCISSOR = 3

    @property
    def beats(self) -> Move:
        return {Move.ROCK: Move.SCISSOR, Move.PAPER: Move.ROCK, Move.SCISSOR: Move.PAPER}[self]


class Outcome(Enum):
    WIN = "You Win!"
    LOSE = "You Lose!"
    DRAW = "Draw!"


@dataclass
class Scoreboard:
    """Running score of the user and the computer."""

    user: int = 0
    computer: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome is Outcome.WIN:
            self.user += 1
        elif outcome is Outcome.LOSE:
            self.computer += 1


def judge(user: Move, computer: Move) -> Outcome:
    """Decide the round from the user's point of view."""
    if user is computer:
        return Outcome.DRAW
    return Outcome.WIN if user.beats is computer else Outcome.LOSE


_USER_LABEL = {Move.ROCK: "ROCK  ", Move.PAPER: "PAPER  ", Move.SCISSOR: "SCISSOR "}


def render_round(user: Move, computer: Move, outcome: Outcome, board: Scoreboard) -> str:
    """Describe a finished round and the score after it."""
    headline = outcome.value
    if outcome is Outcome.DRAW and user is Move.PAPER:
        headline = "Draw"
    return (
        f"\n{headline}"
        + _RULE
        + f"| You: {_USER_LABEL[user]}| Computer: {computer.name} |\n"
        + _RULE
        + "|   Scoreboard         |\n"
        + "|----------------------|\n"
        + f"| You: {board.user}   | Computer: {board.computer} |\n"
        + "------------------------\n"
    )


def _tokens(read: Callable[[], str]) -> Iterator[str]:
    while True:
        yield from read().split()


def _read_int(tokens: Iterator[str]) -> int | None:
    try:
        return int(next(tokens))
    except ValueError:
        return None


def play(
    rng: random.Random,
    read: Callable[[], str],
    write: Callable[[str], object],
    clear: Callable[[], object],
) -> Outcome | None:
    """Show the menu and play one round; return its outcome, or None on exit."""
    tokens = _tokens(read)
    board = Scoreboard()
    write(_TITLE)
    menu_choice = _read_int(tokens)
    while True:
        computer = Move(rng.randint(1, 3))
        write(str(computer.value))
        if menu_choice == 1:
            write(_MENU)
            choice = _read_int(tokens)
            if choice == EXIT_CHOICE:
                write(_THANKS)
                return None
            user = {1: Move.ROCK, 2: Move.PAPER}.get(choice, Move.SCISSOR)
            outcome = judge(user, computer)
            board.record(outcome)
            clear()
            write(render_round(user, computer, outcome, board))
            return outcome
        if menu_choice == 2:
            write(_THANKS)
            return None
        write("\n" + _TITLE)
        menu_choice = _read_int(tokens)


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