import sys

from dfasim.cli import main

sys.exit(main())
