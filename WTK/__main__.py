import sys

from WTK.cli import main

sys.exit(main())
