import sys

from nuxtgen.cli import main

sys.exit(main())
