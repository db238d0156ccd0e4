import sys

from letterpool.main import main

sys.exit(main())
