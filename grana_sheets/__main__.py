import sys

from grana_sheets.cli import main

sys.exit(main())
