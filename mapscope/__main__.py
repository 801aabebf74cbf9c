"""Allow ``python -m mapscope``."""

import sys

from mapscope.cli import main


if __name__ == "__main__":
    sys.exit(main())
