import sys

from ratcalc.repl import main

sys.exit(main())
