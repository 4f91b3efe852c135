"""Module entry point for ``python -m sshhop``."""

import sys

from sshhop.main import main


if __name__ == "__main__":
    sys.exit(main())
