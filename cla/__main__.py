"""Entry point for `python -m cla` and the `cla` console script."""

import sys

from cla.cli import main_entry
from cla.utils.exceptions import ClaError


def main() -> None:
    """Run the CLI and exit with its status code."""
    try:
        sys.exit(main_entry())
    except KeyboardInterrupt:
        print("Operation cancelled by user", file=sys.stderr)
        sys.exit(130)
    except (ClaError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
