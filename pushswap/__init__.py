"""Two-stack sorting: an instruction generator, a command optimiser and a checker."""

__version__ = "1.0.0"