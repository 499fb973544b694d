# examples/main.py
from __future__ import annotations

import sys

from cg2d.demo import main


if __name__ == "__main__":
    sys.exit(main())
