import sys

from .tools import cli

sys.exit(cli.main())
