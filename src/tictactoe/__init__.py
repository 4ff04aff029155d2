"""Terminal tic-tac-toe against a scripted / random computer."""

__version__ = "0.1.0"
