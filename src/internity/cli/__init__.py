"""CLI layer — argument parsing, the interactive loop, and rendering.

This package is the outermost layer of the application.  It may import
from ``core``, ``infra``, and ``utils``, but no other layer may import
from ``cli``.
"""
