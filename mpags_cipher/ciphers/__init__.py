"""Concrete cipher algorithms."""

from .caesar   import CaesarCipher
from .playfair import PlayfairCipher, PlayfairSquare
from .vigenere import VigenereCipher

__all__ = [
    "CaesarCipher",
    "PlayfairCipher",
    "PlayfairSquare",
    "VigenereCipher",
]
