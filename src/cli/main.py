"""
Main CLI module.

Runs the pattern walkthrough and prints its transcript to stdout. The
command takes no arguments.
"""
import sys

from src.bootstrap import create_application


def main() -> int:
    """Main CLI entry point."""
    app = create_application()
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
