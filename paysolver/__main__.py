import sys

from paysolver.cli import main

sys.exit(main())
