"""
mpags_cipher — Classical Cipher Toolkit
=======================================
Caesar, Playfair and Vigenère ciphers behind one interface.

    Caesar    — integer shift, enciphered concurrently over 4 threads
    Playfair  — digraph substitution on a 5x5 key square
    Vigenère  — repeating-keyword polyalphabetic shift

None of these offer any real security. They are for teaching.

Author : mpags-cipher developers
License: MIT
"""

__version__  = "0.5.0"
__author__   = "mpags-cipher developers"

from .modes    import CipherMode, CipherType
from .cipher   import Cipher, InvalidKey
from .ciphers  import CaesarCipher, PlayfairCipher, PlayfairSquare, VigenereCipher
from .factory  import cipher_factory
from .dispatch import apply_concurrently, run_cipher, split_ranges
from .transform import transform_char, transform_text

__all__ = [
    "CipherMode",
    "CipherType",
    "Cipher",
    "InvalidKey",
    "CaesarCipher",
    "PlayfairCipher",
    "PlayfairSquare",
    "VigenereCipher",
    "cipher_factory",
    "apply_concurrently",
    "run_cipher",
    "split_ranges",
    "transform_char",
    "transform_text",
]
