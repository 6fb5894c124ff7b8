"""Allow ``python -m hstrings``."""

import sys

from hstrings.cli import main

sys.exit(main())
