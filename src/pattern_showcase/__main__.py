"""Allow ``python -m pattern_showcase``."""
import sys

from pattern_showcase.cli.main import main

sys.exit(main())
