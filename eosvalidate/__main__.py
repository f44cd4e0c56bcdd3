"""Allow ``python -m eosvalidate``."""

import sys

from eosvalidate.cli import main

sys.exit(main())
