"""
Terminal Minesweeper.

- game: board engine (mines, reveal, flags, cursor, clock)
- terminal: curses renderer, key bindings and game loop
- cli: preset selection and entry point
"""
__version__ = "0.1.0"
