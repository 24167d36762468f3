"""Entry point for the task client.

Usage:
    python -m src.tasks <command> [options]
"""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
