"""
Cipher factory
==============
Turns a (CipherType, raw key) pair into a ready-to-use cipher.
Key validation belongs to each cipher's constructor; `InvalidKey`
raised there reaches the caller unchanged.
"""

import logging

from .cipher import Cipher
from .ciphers import CaesarCipher, PlayfairCipher, VigenereCipher
from .modes import CipherType

logger = logging.getLogger(__name__)

CIPHER_CLASSES = {
    CipherType.CAESAR:   CaesarCipher,
    CipherType.PLAYFAIR: PlayfairCipher,
    CipherType.VIGENERE: VigenereCipher,
}


def cipher_factory(cipher_type: CipherType, key: str) -> Cipher:
    """Build the cipher for `cipher_type`. Raises InvalidKey or ValueError."""
    try:
        cls = CIPHER_CLASSES[cipher_type]
    except KeyError:
        raise ValueError(f"Unknown cipher type: {cipher_type!r}") from None
    cipher = cls(key)
    logger.debug(f"Built {cipher!r}")
    return cipher
