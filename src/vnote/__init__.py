"""vnote — a command-line tool for taking micro notes."""

__version__ = "0.1.0"
