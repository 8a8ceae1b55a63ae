import sys

from euler_orbits.cli.main import main

sys.exit(main())
