import sys

from dailies.main import main

sys.exit(main())
