import sys

from meteor_dodge.cli import main

sys.exit(main())
