import sys

from racelog.cli import main

sys.exit(main())
