"""inline-chaos: a demonstration of inline styling gone wrong."""

__version__ = "0.1.0"
