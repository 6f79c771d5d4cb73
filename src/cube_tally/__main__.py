"""Allow ``python -m cube_tally``."""

from cube_tally.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
