"""Allow ``python -m nwx``."""

import sys

from nwx.cli import main

sys.exit(main())
