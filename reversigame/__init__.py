"""Two-player Reversi: board rules, game state with save/load, and a pygame window."""

__version__ = "0.1.0"