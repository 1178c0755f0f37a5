"""FlipTurn: Reversi with energy skills, corner bonuses, a minimax opponent and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]