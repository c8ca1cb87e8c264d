"""Allow ``python -m pipefmt``."""

import sys

from pipefmt.cli import main

sys.exit(main())
