import sys

from housekeeping.cli import main

sys.exit(main())
