"""Command-line interface."""
import sys

from boxsize.main import main

if __name__ == "__main__":
    sys.exit(main())
