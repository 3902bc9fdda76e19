"""A small tcod roguelike: two rooms, a tunnel and a player walking between them."""

__version__ = '0.1.0'
