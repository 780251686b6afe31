"""A small interactive shell with built-in commands, its own environment list and syntax checks."""

__version__ = "0.1.0"