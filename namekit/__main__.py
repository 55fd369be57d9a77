"""Entry point for ``python -m namekit``."""

import sys

from namekit.cli import main

sys.exit(main())
