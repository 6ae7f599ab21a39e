"""Module entry point."""

import sys

from fsutil.cli import main


if __name__ == "__main__":
    sys.exit(main())
