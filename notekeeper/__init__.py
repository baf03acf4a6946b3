"""Account and notes backend with credential and session authentication."""

__version__ = "0.1.0"
