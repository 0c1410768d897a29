"""get-llms entry point."""

import sys


def _cli() -> None:
    """Run the command-line driver and exit with its status."""
    from get_llms.cli import main

    sys.exit(main())


if __name__ == "__main__":
    _cli()
