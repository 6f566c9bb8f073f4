"""montyhall — play and simulate the Monty Hall game from the command line."""

__version__ = "0.1.0"
