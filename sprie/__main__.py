import sys

from sprie.cli import main

sys.exit(main())
