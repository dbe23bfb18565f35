import sys

from glyphplot.cli.main import main

sys.exit(main())
