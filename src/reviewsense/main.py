"""Main entry point for ReviewSense."""

import sys

from reviewsense.cli import main as cli_main


def main():
    """Main entry point - delegates to the CLI, which also launches the UI."""
    cli_main(sys.argv[1:])


if __name__ == "__main__":
    main()
