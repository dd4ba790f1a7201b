"""
main.py — Entry point.

Run with:
    python main.py [--width 40 --height 30 --tile-size 16 --delay 60 ...]

Requires:
    pip install pygame
"""

from tilesnake.cli import main


if __name__ == "__main__":
    main()
