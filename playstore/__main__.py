# playstore/__main__.py
"""
Run the server:
    python -m playstore [port]
"""

import sys

from playstore.server import main

if __name__ == "__main__":
    sys.exit(main())
