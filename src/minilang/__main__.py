import sys

from .repl import repl
from .runner import main

if len(sys.argv) > 1:
    sys.exit(main())

repl()
