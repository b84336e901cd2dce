"""Internity — command-line internship application tracker.

Parses one command per line, keeps the list in memory, and saves it to a
flat file after every command.
"""

from internity.version import __version__

__all__: list[str] = ["__version__"]
