import sys

from subpad.cli import main

sys.exit(main())
