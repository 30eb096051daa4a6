import sys

from ledgerstats.cli import main

sys.exit(main())
