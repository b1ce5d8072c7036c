#
# PROJECT: matrix-transforms
# MODULE: matrix_transforms/__main__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
