import sys

from vfsnames.cli import main

sys.exit(main())
