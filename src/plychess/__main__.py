"""Allow ``python -m plychess``."""

import sys

from plychess.app import main

sys.exit(main())
