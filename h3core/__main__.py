"""Allow ``python -m h3core``."""

import sys

from .cli import main

sys.exit(main())
