"""Module entrypoint for running Lotindex as ``python -m lotindex``."""

from __future__ import annotations

from lotindex.cli import main


if __name__ == "__main__":
    main()
