"""Build-an-atom game engine and terminal front-end."""

__version__ = "0.1.0"
