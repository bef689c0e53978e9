"""
Entry point for module execution (``python -m dart2csharp``).

Delegates to the CLI handler in ``dart2csharp.cli.__main__``.
"""

import sys
from dart2csharp.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
