"""
Main entry point for running Word Counter with ``python -m word_counter``.
"""

import sys

from word_counter.server import main

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("Server stopped by user")
        sys.exit(0)
