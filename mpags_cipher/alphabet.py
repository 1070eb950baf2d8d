"""
Alphabet Utilities
==================
Case folding and modular index arithmetic over the 26-letter Latin
alphabet. Shared by every cipher in the package.
"""

ALPHABET      = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)   # 26


def is_letter(ch: str) -> bool:
    """True for A-Z / a-z only (no accented or non-Latin letters)."""
    return len(ch) == 1 and ch.upper() in ALPHABET


def to_index(ch: str) -> int:
    """Alphabet position 0-25 of a letter, ignoring case."""
    return ord(ch.upper()) - ord("A")


def to_letter(index: int, lower: bool = False) -> str:
    """Letter at `index` (taken mod 26), upper case unless `lower`."""
    letter = ALPHABET[index % ALPHABET_SIZE]
    return letter.lower() if lower else letter


def shift_index(index: int, offset: int) -> int:
    return (index + offset) % ALPHABET_SIZE


def unshift_index(index: int, offset: int) -> int:
    return (index - offset) % ALPHABET_SIZE


def shift_letter(ch: str, offset: int) -> str:
    """Shift a single letter by `offset`, keeping its case."""
    return to_letter(shift_index(to_index(ch), offset), lower=ch.islower())
