"""A terminal arcade shooter: ANSI screen output, raw keyboard input, game rules and a score file."""

__version__ = "1.0.0"
__all__ = ["__version__"]