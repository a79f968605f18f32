import sys

from gencontext.cli import main

sys.exit(main())
