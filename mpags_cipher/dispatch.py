"""
Concurrent dispatch
===================
Caesar is the only cipher whose output for one character never depends
on another, so its input can be cut into contiguous ranges and the
ranges enciphered on separate threads by the same (immutable) instance.

Ranges:   exactly `workers` of them, each `len // workers` long, the last
          one also taking the remainder. Short inputs give empty ranges.
Ordering: results are joined by range index, never by completion order.
Waiting:  each result is awaited in POLL_INTERVAL slices; an elapsed
          slice only logs "waiting..." and the wait continues. Tasks are
          never cancelled.

Playfair and Vigenère carry state across characters and always run
synchronously on the calling thread.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import List, Tuple

from .cipher import Cipher
from .modes import CipherMode, CipherType

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4
POLL_INTERVAL   = 10.0   # seconds between liveness messages


def split_ranges(length: int, workers: int) -> List[Tuple[int, int]]:
    """Return `workers` contiguous (start, length) ranges covering `length`."""
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    chunk = length // workers
    ranges = [(i * chunk, chunk) for i in range(workers - 1)]
    ranges.append(((workers - 1) * chunk, chunk + length % workers))
    return ranges


def _await(future: Future, poll_interval: float) -> str:
    while True:
        done, _ = wait([future], timeout=poll_interval)
        if done:
            return future.result()
        logger.info("waiting...")


def apply_concurrently(cipher: Cipher, input_text: str, cipher_mode: CipherMode,
                       workers: int = DEFAULT_WORKERS,
                       poll_interval: float = POLL_INTERVAL) -> str:
    """
    Apply a character-independent cipher over `workers` threads.

    Output is identical to `cipher.apply_cipher(input_text, cipher_mode)`.
    """
    ranges = split_ranges(len(input_text), workers)
    logger.debug(f"Dispatching {len(input_text)} chars over ranges {ranges}")

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(cipher.apply_cipher, input_text[start:start + size], cipher_mode)
            for start, size in ranges
        ]
        output = []
        for future in futures:
            output.append(_await(future, poll_interval))
    return "".join(output)


def run_cipher(cipher: Cipher, cipher_type: CipherType, input_text: str,
               cipher_mode: CipherMode, workers: int = DEFAULT_WORKERS) -> str:
    """Run `cipher`, going concurrent only for Caesar."""
    if cipher_type == CipherType.CAESAR:
        return apply_concurrently(cipher, input_text, cipher_mode, workers)
    return cipher.apply_cipher(input_text, cipher_mode)
