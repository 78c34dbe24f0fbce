"""Run the tilecollect command line as `python -m stages`."""

import sys

from stages.cli import main

sys.exit(main())
