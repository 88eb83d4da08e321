import sys

from routegen.interface.cli.app import main

sys.exit(main())
