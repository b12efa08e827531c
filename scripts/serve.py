#!/usr/bin/env python3
"""Run the salon API with the host and port from settings.

Usage:
  python3 scripts/serve.py
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import uvicorn

from luxe_salon.core.config import settings


def main() -> None:
    uvicorn.run(
        "luxe_salon.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENV.lower() in {"dev", "local"},
    )


if __name__ == "__main__":
    main()
