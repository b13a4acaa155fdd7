#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [-b | -i | -e]

    -b  Beginner       8 x 8  grid with 10 mines (default)
    -i  Intermediate  16 x 16 grid with 40 mines
    -e  Expert        16 x 30 grid with 99 mines

Keys: h/j/k/l or arrows to move, space to reveal, f to flag, q to quit.
"""
from src.minesweeper.cli import main


if __name__ == "__main__":
    main()
