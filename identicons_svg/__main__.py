"""Allow ``python -m identicons_svg``."""

import sys

from identicons_svg.cli import main

sys.exit(main())
