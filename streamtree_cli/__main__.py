"""
Module execution entry point.

Allows running with: python -m streamtree_cli
"""

import sys
from streamtree_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
