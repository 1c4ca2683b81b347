"""
Entry point for module execution (``python -m js_codemods``).
"""

import sys

from js_codemods.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
