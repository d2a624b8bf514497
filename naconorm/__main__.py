"""Module entrypoint for running naconorm as ``python -m naconorm``."""

from __future__ import annotations

from naconorm.cli import main


if __name__ == "__main__":
    main()
