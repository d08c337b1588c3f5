"""Allow ``python -m randline``."""

import sys

from randline.cli import main

sys.exit(main())
