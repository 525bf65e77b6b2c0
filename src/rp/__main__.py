"""Module entry point for ``python -m rp``."""

from rp.cli import main

if __name__ == "__main__":
    main()
