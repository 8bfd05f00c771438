"""Module entrypoint for running bookpager as ``python -m bookpager``."""

from __future__ import annotations

from bookpager.cli import main


if __name__ == "__main__":
    main()
