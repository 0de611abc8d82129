"""Command that prints the debug-weight hash of a string."""

from __future__ import annotations

import sys

from .strhash import StringHash


def main(argv: list[str] | None = None) -> int:
    """Hash the first argument with the fixed debug weights and print it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Please provide a string to hash")
        return 1
    key = args[0]
    print(f"h({key})={StringHash(True)(key)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())