"""Module entrypoint for running inid as ``python -m inid``."""

from __future__ import annotations

from inid.cli import main


if __name__ == "__main__":
    main()
