import sys

from plugin_scaffold.cli import main

sys.exit(main())
