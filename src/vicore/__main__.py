import sys

from vicore.cli import main

sys.exit(main())
