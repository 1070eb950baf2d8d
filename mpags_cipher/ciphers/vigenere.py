"""
Vigenère Polyalphabetic Cipher
==============================
A keyword selects a different Caesar shift for each successive letter.

Historical note: Blaise de Vigenère, 1553. Called "le chiffre
indéchiffrable" for 300 years until Kasiski published a general attack
in 1863. Educational only.

The key is repeated cyclically over the letters of the message.
Characters that are not letters are copied as-is and do not consume a
key position.
"""

import logging

from ..alphabet import is_letter, shift_index, to_index, to_letter, unshift_index
from ..cipher import InvalidKey
from ..modes import CipherMode

logger = logging.getLogger(__name__)


class VigenereCipher:
    """Classical Vigenère cipher with a repeating keyword."""

    def __init__(self, key: str):
        keyword = "".join(ch.upper() for ch in key if is_letter(ch))
        if not keyword:
            raise InvalidKey(f"Vigenère key must contain at least one letter, got '{key}'")
        self._keyword = keyword
        self._offsets = tuple(to_index(ch) for ch in keyword)
        logger.debug(f"Vigenère keyword '{keyword}' (period {len(keyword)})")

    @property
    def keyword(self) -> str:
        return self._keyword

    def apply_cipher(self, input_text: str, cipher_mode: CipherMode) -> str:
        """Encrypt or decrypt, preserving the case of every letter."""
        combine = shift_index if cipher_mode == CipherMode.ENCRYPT else unshift_index
        period  = len(self._offsets)
        result  = []
        k_idx   = 0
        for ch in input_text:
            if is_letter(ch):
                idx = combine(to_index(ch), self._offsets[k_idx % period])
                result.append(to_letter(idx, lower=ch.islower()))
                k_idx += 1
            else:
                result.append(ch)
        return "".join(result)

    def __repr__(self):
        return f"VigenereCipher(keyword='{self._keyword}')"
