from __future__ import annotations
import sys
from plainpad.app import run_app


def main() -> int:
    """Module entrypoint for `python -m plainpad.main` and the `plainpad` script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
