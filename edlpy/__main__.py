import sys

from edlpy.cli import main

sys.exit(main())
