"""
Kitten Idle package root.

A small command-line idle game: gather yarn, adopt kittens that gather it for
you, and buy food bowls that make every kitten more productive. Domain logic
(economy, tick engine, persistence) is kept free of terminal I/O so it can be
driven from tests or another front end.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
