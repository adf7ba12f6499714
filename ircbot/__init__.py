"""ircbot - a single-channel IRC command bot."""

__version__ = "0.1.0"
