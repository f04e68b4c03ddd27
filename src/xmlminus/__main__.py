"""Allow running the recognizer with ``python -m xmlminus``."""

import sys

from xmlminus.cli import main

sys.exit(main())
