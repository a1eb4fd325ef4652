"""Small terminal games: hangman, snakes and ladders, rock-paper-scissors."""

__version__ = "0.1.0"
__all__ = ["hangman", "snakes", "rps"]