"""
Allow ``python -m cli_simulator``.
"""

import sys

from .main import main

sys.exit(main())
