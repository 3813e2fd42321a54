import sys

from .tocubemap import main

sys.exit(main())
