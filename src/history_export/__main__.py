import sys

from history_export.cli import main

sys.exit(main())
