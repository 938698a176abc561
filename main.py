"""Run the CLI from a checkout: `python main.py nanoid 10 --count=3`.

Same behavior as the installed `cli-fabric` script; `src/` is added to the
import path so no editable install is required.
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from cli.main import run  # noqa: E402

if __name__ == "__main__":
    run()
