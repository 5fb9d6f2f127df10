import sys

from svgprogress.cli import main

sys.exit(main())
