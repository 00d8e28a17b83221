import sys

from appenv.bootstrap import main

sys.exit(main())
