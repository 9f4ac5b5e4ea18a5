"""Launch the cube viewer from a source checkout."""
from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from painter3d.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
