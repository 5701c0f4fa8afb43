"""Allow ``python -m envkey``."""

import sys

from envkey.cli import main

sys.exit(main())
