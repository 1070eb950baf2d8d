"""
Cipher capability
=================
Every algorithm in `mpags_cipher.ciphers` exposes the same single
operation:

    apply_cipher(input_text, cipher_mode) -> output_text

The variants share no base class. `Cipher` is a structural protocol, so
anything with a matching `apply_cipher` method qualifies. Instances are
immutable after construction and may be shared between threads.
"""

from typing import Protocol

from .modes import CipherMode


class InvalidKey(ValueError):
    """Raised when a key fails the chosen cipher's validity rules."""


class Cipher(Protocol):

    def apply_cipher(self, input_text: str, cipher_mode: CipherMode) -> str:
        """Encrypt or decrypt `input_text`. Pure and deterministic."""
        ...
