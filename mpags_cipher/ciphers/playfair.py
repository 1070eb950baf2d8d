"""
Playfair Digraph Cipher
=======================
Letters are enciphered in pairs against a 5x5 key square.

Historical note: devised by Charles Wheatstone in 1854 and promoted by
Lord Playfair. Used by British forces into the First World War.
Substituting digraphs rather than single letters flattens simple
frequency analysis, but the cipher falls quickly to digraph statistics.

Key square:  key letters in order (duplicates skipped), then the rest of
             the alphabet. I and J share a cell, so J never appears.
Preparation: on encryption, a repeated letter inside a pair is split by
             a filler, and an odd final letter is completed by one.
             The filler is FILLER, or ALT_FILLER when the letter being
             padded is FILLER itself.
Lossy:       output is upper case, non-letters are dropped, J becomes I
             and fillers are not removed on decryption. Output length may
             differ from input length.
"""

import logging
from typing import Dict, List, Tuple

from ..alphabet import ALPHABET, is_letter
from ..cipher import InvalidKey
from ..modes import CipherMode

logger = logging.getLogger(__name__)

GRID_SIZE = 5


def _normalize(text: str) -> str:
    """Upper-case letters only, with J folded into I."""
    return "".join(ch.upper() for ch in text if is_letter(ch)).replace("J", "I")


class PlayfairSquare:
    """5x5 grid of 25 distinct letters with lookups in both directions."""

    def __init__(self, keyword: str):
        cells: List[str] = []
        for ch in _normalize(keyword) + ALPHABET.replace("J", ""):
            if ch not in cells:
                cells.append(ch)
        self._cells = tuple(cells)
        self._positions: Dict[str, Tuple[int, int]] = {
            ch: divmod(i, GRID_SIZE) for i, ch in enumerate(self._cells)
        }

    @property
    def letters(self) -> str:
        """All 25 cells, row by row."""
        return "".join(self._cells)

    def position(self, letter: str) -> Tuple[int, int]:
        """(row, col) of `letter`. J resolves to the I cell."""
        letter = letter.upper()
        if letter == "J":
            letter = "I"
        return self._positions[letter]

    def letter_at(self, row: int, col: int) -> str:
        return self._cells[(row % GRID_SIZE) * GRID_SIZE + col % GRID_SIZE]

    def rows(self) -> List[str]:
        text = self.letters
        return [text[i:i + GRID_SIZE] for i in range(0, len(text), GRID_SIZE)]

    def __str__(self):
        return "\n".join(" ".join(row) for row in self.rows())


class PlayfairCipher:
    """Playfair cipher keyed by a keyword or phrase."""

    FILLER     = "X"
    ALT_FILLER = "Q"

    def __init__(self, key: str):
        keyword = _normalize(key)
        if not keyword:
            raise InvalidKey(f"Playfair key must contain at least one letter, got '{key}'")
        self._keyword = keyword
        self._square  = PlayfairSquare(keyword)
        logger.debug(f"Playfair key square:\n{self._square}")

    @property
    def square(self) -> PlayfairSquare:
        return self._square

    @classmethod
    def filler_for(cls, letter: str) -> str:
        return cls.ALT_FILLER if letter == cls.FILLER else cls.FILLER

    @classmethod
    def prepare_digraphs(cls, text: str) -> List[str]:
        """
        Split plaintext into encryption-ready pairs.

        "HELLO" -> ["HE", "LX", "LO"]; "AB C" -> ["AB", "CX"].
        """
        letters = _normalize(text)
        pairs = []
        i = 0
        while i < len(letters):
            first = letters[i]
            second = letters[i + 1] if i + 1 < len(letters) else None
            if second is None or second == first:
                # pad, then resume at the unpaired letter
                pairs.append(first + cls.filler_for(first))
                i += 1
            else:
                pairs.append(first + second)
                i += 2
        return pairs

    @classmethod
    def split_digraphs(cls, text: str) -> List[str]:
        """Fixed pairs as received; a trailing odd letter is padded."""
        letters = _normalize(text)
        if len(letters) % 2:
            letters += cls.filler_for(letters[-1])
        return [letters[i:i + 2] for i in range(0, len(letters), 2)]

    def apply_cipher(self, input_text: str, cipher_mode: CipherMode) -> str:
        """Transform digraph by digraph. Always returns upper case."""
        if cipher_mode == CipherMode.ENCRYPT:
            pairs, step = self.prepare_digraphs(input_text), 1
        else:
            pairs, step = self.split_digraphs(input_text), -1
        return "".join(self._substitute(pair, step) for pair in pairs)

    # ── helpers ──────────────────────────────────────────────────────────────

    def _substitute(self, pair: str, step: int) -> str:
        sq = self._square
        r1, c1 = sq.position(pair[0])
        r2, c2 = sq.position(pair[1])
        if r1 == r2:
            return sq.letter_at(r1, c1 + step) + sq.letter_at(r2, c2 + step)
        if c1 == c2:
            return sq.letter_at(r1 + step, c1) + sq.letter_at(r2 + step, c2)
        # rectangle rule is its own inverse
        return sq.letter_at(r1, c2) + sq.letter_at(r2, c1)

    def __repr__(self):
        return f"PlayfairCipher(keyword='{self._keyword}')"
