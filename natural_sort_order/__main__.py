"""Module entrypoint for running the CLI as ``python -m natural_sort_order``."""

from __future__ import annotations

from natural_sort_order.cli import main


if __name__ == "__main__":
    main()
