"""
mpags_cipher — Cipher Test Suite
================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_ciphers.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from mpags_cipher.alphabet        import ALPHABET, shift_letter, to_index, to_letter
from mpags_cipher.cipher          import InvalidKey
from mpags_cipher.ciphers         import CaesarCipher, PlayfairCipher, VigenereCipher
from mpags_cipher.dispatch        import apply_concurrently, run_cipher, split_ranges
from mpags_cipher.factory         import cipher_factory
from mpags_cipher.modes           import CipherMode, CipherType
from mpags_cipher.transform       import transform_char, transform_text

ENC = CipherMode.ENCRYPT
DEC = CipherMode.DECRYPT

MSG   = "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG"
MIXED = "Attack at Dawn, 1553!"

# ── Alphabet ──────────────────────────────────────────────────────────────────
def test_alphabet_index_ignores_case():
    assert to_index("a") == to_index("A") == 0
    assert to_index("z") == 25

def test_alphabet_letter_wraps():
    assert to_letter(26) == "A"
    assert to_letter(-1, lower=True) == "z"

def test_alphabet_shift_keeps_case():
    assert shift_letter("y", 3) == "b"
    assert shift_letter("B", -3) == "Y"

# ── Caesar ────────────────────────────────────────────────────────────────────
def test_caesar_known_answer():
    c = CaesarCipher("3")
    assert c.apply_cipher("HELLO", ENC) == "KHOOR"
    assert c.apply_cipher("KHOOR", DEC) == "HELLO"

@pytest.mark.parametrize("key", ["0", "1", "13", "25", "26", "-3", "+7", "1000"])
def test_caesar_roundtrip(key):
    c = CaesarCipher(key)
    assert c.apply_cipher(c.apply_cipher(MIXED, ENC), DEC) == MIXED

def test_caesar_negative_shift_wraps():
    assert CaesarCipher("-1").shift == 25
    assert CaesarCipher("-1").apply_cipher("A", ENC) == "Z"

def test_caesar_preserves_case_and_length():
    ct = CaesarCipher("5").apply_cipher(MIXED, ENC)
    assert len(ct) == len(MIXED)
    assert ct.startswith("Fyyfhp")

def test_caesar_null_key():
    assert CaesarCipher("").apply_cipher(MSG, ENC) == MSG

@pytest.mark.parametrize("key", ["abc", "3a", "1.5", " 3", "3 "])
def test_caesar_invalid_key(key):
    with pytest.raises(InvalidKey):
        CaesarCipher(key)

# ── Playfair ──────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("key", ["PLAYFAIREXAMPLE", "A", "JJJ", "ZEBRAS", "the quick brown fox"])
def test_playfair_square_has_25_distinct_letters(key):
    letters = PlayfairCipher(key).square.letters
    assert len(letters) == 25
    assert len(set(letters)) == 25
    assert "J" not in letters
    assert set(letters) == set(ALPHABET) - {"J"}

def test_playfair_square_key_first():
    sq = PlayfairCipher("Playfair Example").square
    assert sq.rows()[0] == "PLAYF"
    assert sq.rows()[1] == "IREXM"
    assert sq.position("J") == sq.position("I") == (1, 0)
    assert sq.letter_at(1, 0) == "I"

def test_playfair_digraphs_split_double_letters():
    assert PlayfairCipher.prepare_digraphs("HELLO") == ["HE", "LX", "LO"]

def test_playfair_digraphs_pad_odd_length():
    assert PlayfairCipher.prepare_digraphs("AB C") == ["AB", "CX"]

def test_playfair_digraphs_alt_filler_for_x():
    assert PlayfairCipher.prepare_digraphs("XX") == ["XQ", "XQ"]
    assert PlayfairCipher.prepare_digraphs("ABX") == ["AB", "XQ"]

def test_playfair_known_answer():
    # Wheatstone's classic example
    p = PlayfairCipher("playfair example")
    ct = p.apply_cipher("Hide the gold in the tree stump", ENC)
    assert ct == "BMODZBXDNABEKUDMUIXMMOUVIF"
    assert p.apply_cipher(ct, DEC) == "HIDETHEGOLDINTHETREXESTUMP"

def test_playfair_row_column_rectangle_rules():
    p = PlayfairCipher("PLAYFAIREXAMPLE")
    assert p.apply_cipher("PL", ENC) == "LA"   # same row
    assert p.apply_cipher("PI", ENC) == "IB"   # same column
    assert p.apply_cipher("PE", ENC) == "AI"   # rectangle
    assert p.apply_cipher("LAIBAI", DEC) == "PLPIPE"

def test_playfair_roundtrip_without_doubles():
    p = PlayfairCipher("MONARCHY")
    assert p.apply_cipher(p.apply_cipher("WEAREDISCOVERED", ENC), DEC) == "WEAREDISCOVEREDX"

def test_playfair_output_upper_case():
    assert PlayfairCipher("KEY").apply_cipher("hello", ENC).isupper()

def test_playfair_decrypt_odd_length_is_total():
    assert len(PlayfairCipher("KEY").apply_cipher("ABC", DEC)) == 4

@pytest.mark.parametrize("key", ["", "123", "!?", "  "])
def test_playfair_invalid_key(key):
    with pytest.raises(InvalidKey):
        PlayfairCipher(key)

# ── Vigenère ──────────────────────────────────────────────────────────────────
def test_vigenere_known_answer():
    v = VigenereCipher("LEMON")
    assert v.apply_cipher("ATTACKATDAWN", ENC) == "LXFOPVEFRNHR"
    assert v.apply_cipher("LXFOPVEFRNHR", DEC) == "ATTACKATDAWN"

@pytest.mark.parametrize("key", ["A", "KEY", "Vigenere", "lemon"])
def test_vigenere_roundtrip_preserves_case(key):
    v = VigenereCipher(key)
    ct = v.apply_cipher(MIXED, ENC)
    assert ct != MIXED or key == "A"
    assert v.apply_cipher(ct, DEC) == MIXED

def test_vigenere_non_letters_keep_key_position():
    v = VigenereCipher("LEMON")
    assert v.apply_cipher("ATT ACK", ENC) == "LXF OPV"

def test_vigenere_key_filtered():
    assert VigenereCipher("le-mon 9").keyword == "LEMON"

@pytest.mark.parametrize("key", ["", "123", "--"])
def test_vigenere_invalid_key(key):
    with pytest.raises(InvalidKey):
        VigenereCipher(key)

# ── Factory ───────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("cipher_type, key, cls", [
    (CipherType.CAESAR,   "5",    CaesarCipher),
    (CipherType.PLAYFAIR, "KEY",  PlayfairCipher),
    (CipherType.VIGENERE, "KEY",  VigenereCipher),
])
def test_factory_builds_matching_cipher(cipher_type, key, cls):
    assert isinstance(cipher_factory(cipher_type, key), cls)

@pytest.mark.parametrize("cipher_type, key", [
    (CipherType.CAESAR,   "abc"),
    (CipherType.PLAYFAIR, ""),
    (CipherType.VIGENERE, "123"),
])
def test_factory_propagates_invalid_key(cipher_type, key):
    with pytest.raises(InvalidKey) as err:
        cipher_factory(cipher_type, key)
    assert str(err.value)

def test_factory_invalid_key_message_unchanged():
    with pytest.raises(InvalidKey) as via_factory:
        cipher_factory(CipherType.VIGENERE, "123")
    with pytest.raises(InvalidKey) as direct:
        VigenereCipher("123")
    assert str(via_factory.value) == str(direct.value)

def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError):
        cipher_factory("enigma", "KEY")

# ── Concurrent dispatch ───────────────────────────────────────────────────────
def test_split_ranges_last_takes_remainder():
    assert split_ranges(10, 4) == [(0, 2), (2, 2), (4, 2), (6, 4)]

def test_split_ranges_short_input_has_empty_ranges():
    assert split_ranges(2, 4) == [(0, 0), (0, 0), (0, 0), (0, 2)]
    assert split_ranges(0, 4) == [(0, 0)] * 4

@pytest.mark.parametrize("length", [0, 1, 3, 4, 7, 100, 1001])
@pytest.mark.parametrize("workers", [1, 2, 4, 7])
def test_split_ranges_cover_input_exactly(length, workers):
    ranges = split_ranges(length, workers)
    assert len(ranges) == workers
    pos = 0
    for start, size in ranges:
        assert start == pos
        pos += size
    assert pos == length

def test_split_ranges_rejects_zero_workers():
    with pytest.raises(ValueError):
        split_ranges(10, 0)

@pytest.mark.parametrize("workers", [1, 2, 3, 4, 9])
@pytest.mark.parametrize("text", ["", "A", "HEL", MSG, MSG * 37 + "XYZ"])
def test_concurrent_caesar_matches_sequential(workers, text):
    c = CaesarCipher("11")
    for mode in (ENC, DEC):
        assert apply_concurrently(c, text, mode, workers=workers) == c.apply_cipher(text, mode)

def test_concurrent_wait_logs_liveness(caplog):
    import threading
    import logging

    release = threading.Event()

    class SlowCipher:
        def apply_cipher(self, input_text, cipher_mode):
            release.wait(5)
            return input_text

    timer = threading.Timer(0.2, release.set)
    timer.start()
    with caplog.at_level(logging.INFO, logger="mpags_cipher.dispatch"):
        out = apply_concurrently(SlowCipher(), "ABCDEFGH", ENC, workers=2, poll_interval=0.05)
    timer.join()
    assert out == "ABCDEFGH"
    assert "waiting..." in caplog.text

def test_run_cipher_routes_every_type():
    for cipher_type, key in ((CipherType.CAESAR, "3"),
                             (CipherType.PLAYFAIR, "KEY"),
                             (CipherType.VIGENERE, "KEY")):
        c = cipher_factory(cipher_type, key)
        assert run_cipher(c, cipher_type, MSG, ENC) == c.apply_cipher(MSG, ENC)

# ── Input normalization ───────────────────────────────────────────────────────
def test_transform_char():
    assert transform_char("a") == "A"
    assert transform_char("7") == "SEVEN"
    assert transform_char("!") == ""
    assert transform_char("é") == ""

def test_transform_text():
    assert transform_text("Hello, World 2!\n") == "HELLOWORLDTWO"

# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import time
    tests = [
        ("Alphabet — index ignores case",      test_alphabet_index_ignores_case),
        ("Caesar   — known answer",            test_caesar_known_answer),
        ("Caesar   — roundtrip shift 13",      lambda: test_caesar_roundtrip("13")),
        ("Caesar   — invalid key",             lambda: test_caesar_invalid_key("abc")),
        ("Playfair — HELLO digraphs",          test_playfair_digraphs_split_double_letters),
        ("Playfair — odd length padding",      test_playfair_digraphs_pad_odd_length),
        ("Playfair — Wheatstone example",      test_playfair_known_answer),
        ("Playfair — invalid key",             lambda: test_playfair_invalid_key("")),
        ("Vigenère — known answer",            test_vigenere_known_answer),
        ("Vigenère — invalid key",             lambda: test_vigenere_invalid_key("123")),
        ("Factory  — unknown type",            test_factory_rejects_unknown_type),
        ("Dispatch — remainder range",         test_split_ranges_last_takes_remainder),
        ("Dispatch — 4 threads == sequential", lambda: test_concurrent_caesar_matches_sequential(4, MSG * 37)),
        ("Dispatch — routing",                 test_run_cipher_routes_every_type),
        ("Input    — normalization",           test_transform_text),
    ]

    print("\n" + "═" * 70)
    print("  mpags_cipher — Cipher Test Suite")
    print("═" * 70)
    passed = failed = 0
    for name, fn in tests:
        t0 = time.perf_counter()
        try:
            fn()
            elapsed = time.perf_counter() - t0
            print(f"  ✓  {name:<45} {elapsed:.3f}s")
            passed += 1
        except Exception as e:
            print(f"  ✗  {name:<45} FAILED: {e}")
            failed += 1
    print("═" * 70)
    print(f"  {passed} passed  |  {failed} failed")
    print("═" * 70 + "\n")
    sys.exit(0 if failed == 0 else 1)
