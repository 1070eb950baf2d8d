"""
Caesar Shift Cipher
===================
Each letter moves a fixed number of places along the alphabet.

Historical note: used by Julius Caesar with a shift of three. Twenty-six
possible keys; broken by hand in seconds.

Every character is transformed independently of its neighbours, which
is what lets `mpags_cipher.dispatch` split the text across threads.
"""

import logging
import re

from ..alphabet import ALPHABET_SIZE, is_letter, shift_letter
from ..cipher import InvalidKey
from ..modes import CipherMode

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


class CaesarCipher:
    """Caesar cipher keyed by an integer shift."""

    def __init__(self, key: str = ""):
        """
        `key` must be a whole integer, optionally signed. An empty key is
        the null key: shift 0, text passes through unchanged.
        """
        if key == "":
            shift = 0
        elif _INTEGER.fullmatch(key):
            shift = int(key)
        else:
            raise InvalidKey(f"Caesar cipher requires an integer key, got '{key}'")
        self._shift = shift % ALPHABET_SIZE
        logger.debug(f"Caesar key '{key}' -> shift {self._shift}")

    @property
    def shift(self) -> int:
        return self._shift

    def apply_cipher(self, input_text: str, cipher_mode: CipherMode) -> str:
        """Shift every letter; non-letters pass through untouched."""
        offset = self._shift if cipher_mode == CipherMode.ENCRYPT else -self._shift
        return "".join(
            shift_letter(ch, offset) if is_letter(ch) else ch
            for ch in input_text
        )

    def __repr__(self):
        return f"CaesarCipher(shift={self._shift})"
