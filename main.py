"""Main entry point for elibrary-scraper.

For CLI usage, use: elibrary-scraper <contract>
Or run directly: python main.py <contract>
"""

import sys

from elibrary_scraper.interfaces.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
