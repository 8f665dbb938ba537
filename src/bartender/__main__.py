"""Entry point for ``python -m bartender``."""

from bartender.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
