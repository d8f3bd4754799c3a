"""Allow ``python -m tidyfinder``."""

import sys

from tidyfinder.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
