"""Allow ``python -m sweeper``."""
import sys

from .cli import main

sys.exit(main())
