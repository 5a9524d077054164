"""Entry point for running hookstack as a module.

This file allows hookstack to be run with: python -m hookstack
"""

import sys

from hookstack.app import main

if __name__ == "__main__":
    sys.exit(main())
