"""Allows running the cipher tool via: python -m mpags_cipher"""

import sys

from mpags_cipher.cli import main

if __name__ == "__main__":
    sys.exit(main())
