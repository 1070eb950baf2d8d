"""
Input normalization
===================
Reduces raw text to the upper-case letter stream the ciphers expect:
letters are upper-cased, digits are spelled out in English, everything
else is dropped.
"""

DIGIT_WORDS = {
    "0": "ZERO",  "1": "ONE",  "2": "TWO",   "3": "THREE", "4": "FOUR",
    "5": "FIVE",  "6": "SIX",  "7": "SEVEN", "8": "EIGHT", "9": "NINE",
}


def transform_char(ch: str) -> str:
    """Normalize a single character; returns "" for anything dropped."""
    if ch.isascii() and ch.isalpha():
        return ch.upper()
    return DIGIT_WORDS.get(ch, "")


def transform_text(text: str) -> str:
    return "".join(transform_char(ch) for ch in text if not ch.isspace())
