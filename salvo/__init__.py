"""Two-player Battleship: game rules, computer opponent, board rendering, wire protocol and session state."""

__version__ = "0.1.0"
__all__ = ["__version__"]