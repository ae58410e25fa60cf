"""Allow ``python -m string_util``."""

import sys

from string_util.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
