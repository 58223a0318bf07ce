import sys

from smparticles.cli import main

sys.exit(main())
