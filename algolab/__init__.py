"""Small classic algorithms and data structures, each with a runnable command."""

__version__ = "0.1.0"