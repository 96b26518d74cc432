"""Main entry point for the API tester."""

import sys

from src.api_tester import main


if __name__ == "__main__":
    sys.exit(main())
