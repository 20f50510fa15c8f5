import sys

from rlevector.cli import main

sys.exit(main())
