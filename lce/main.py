from __future__ import annotations
import sys
from lce.app import run_app


def main() -> int:
    """Module entrypoint for `python -m lce.main` or `python -m lce` (via __main__)."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
