"""Launch the terminal game: ``python app.py [--board classic] [--seed N]``."""

import sys

from meteor_dodge.cli import main

if __name__ == "__main__":
    sys.exit(main())
