"""Enumerations selecting the cipher algorithm and its direction."""

from enum import Enum


class CipherMode(Enum):
    """Direction of a transformation."""
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class CipherType(Enum):
    """Available cipher algorithms, keyed by their command-line name."""
    CAESAR   = "caesar"
    PLAYFAIR = "playfair"
    VIGENERE = "vigenere"
