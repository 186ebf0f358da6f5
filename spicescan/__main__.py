import sys

from spicescan.cli import main

sys.exit(main())
