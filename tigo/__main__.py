import sys

from tigo.cli import main

sys.exit(main())
