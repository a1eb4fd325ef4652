"""Hangman: guess the hidden word one letter at a time."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

HANGMAN_PARTS = (
    "     _________",
    "    |         |",
    "    |         O",
    "    |        /|\\",
    "    |        / \\",
    "    |",
)

MAX_MISSES = len(HANGMAN_PARTS)

LOSE_BANNER = (
    "-----------------\n"
    "|----YOU LOSE----|\n"
    "------------------\n"
)


@dataclass(frozen=True)
class WordWithHint:
    """A word to guess and the hint shown alongside it."""

    word: str
    hint: str


WORDS = (
    WordWithHint("elephant", "mammal with a trunk"),
    WordWithHint("cat", "a cute jerk which purrs"),
    WordWithHint("lion", "King of the jungle"),
)


def draw_hangman(depth: int) -> str:
    """Return the gallows drawn up to and including part ``depth``."""
    if not 0 <= depth < len(HANGMAN_PARTS):
        raise ValueError(f"depth must be between 0 and {len(HANGMAN_PARTS) - 1}")
    return "".join(f"{part}\n" for part in HANGMAN_PARTS[: depth + 1])


@dataclass
class Hangman:
    """State of one round: the word, the letters revealed and the misses."""

    entry: WordWithHint
    misses: int = 0
    revealed: list[bool] = field(init=False)

    def __post_init__(self) -> None:
        self.revealed = [False] * len(self.entry.word)

    @property
    def display(self) -> str:
        return "".join(
            ch if shown else "_" for ch, shown in zip(self.entry.word, self.revealed)
        )

    @property
    def tries_left(self) -> int:
        return MAX_MISSES - 1 - self.misses

    @property
    def solved(self) -> bool:
        return all(self.revealed)

    @property
    def lost(self) -> bool:
        return self.misses >= MAX_MISSES

    def guess(self, letter: str) -> bool:
        """Reveal every hidden occurrence of ``letter``; count a miss if none."""
        if not letter:
            raise ValueError("a guess needs a letter")
        letter = letter[0].lower()
        found = False
        for index, ch in enumerate(self.entry.word):
            if ch == letter and not self.revealed[index]:
                self.revealed[index] = True
                found = True
        if not found:
            self.misses += 1
        return found


def _characters(read: Callable[[], str]) -> Iterator[str]:
    while True:
        for ch in read():
            if not ch.isspace():
                yield ch


def play(entry: WordWithHint, read: Callable[[], str], write: Callable[[str], object]) -> bool:
    """Play one round on ``entry``; return True if the word was guessed."""
    game = Hangman(entry)
    letters = _characters(read)
    while not game.solved:
        if game.misses:
            write(f"\nTries left:{game.tries_left}\n")
            write(draw_hangman(game.misses - 1))
            write("\n---------\n")
            if game.lost:
                write(LOSE_BANNER)
                return False
        write(f"\n Hint: {entry.hint}")
        write(f"\nWord: {game.display}\n")
        write("Enter a letter: ")
        if game.guess(next(letters)):
            write("Good guess!\n")
        else:
            write("Try again!\n")
    write(f"You guessed the full word: {entry.word}\n")
    return True


def main(argv: list[str] | None = None) -> int:
    try:
        play(random.choice(WORDS), input, lambda text: print(text, end="", flush=True))
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())