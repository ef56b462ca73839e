import sys

from sketchpage._cli import main

sys.exit(main())
