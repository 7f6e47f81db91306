"""
Shift (Caesar) cipher.

Each letter moves a fixed number of places along the alphabet. Case is kept
and anything that is not an ASCII letter passes through unchanged.
"""

from ..alphabet import is_letter, shift_letter
from ..errors import InvalidKeyFormatError
from ..log import log_warn
from ..registry import Algorithm, CipherStrategy, Key, register_cipher

DEFAULT_SHIFT = 3


def encrypt(text: str, shift: int = DEFAULT_SHIFT) -> str:
    return "".join(shift_letter(c, shift) if is_letter(c) else c for c in text)


def decrypt(text: str, shift: int = DEFAULT_SHIFT) -> str:
    return encrypt(text, (26 - shift % 26) % 26)


def parse_shift(key: Key) -> int:
    """Convert an int or numeric string into an offset in [0, 25]."""
    if isinstance(key, bool):
        raise InvalidKeyFormatError(f"Shift key must be an integer, got {key!r}")
    if isinstance(key, int):
        return key % 26
    try:
        return int(str(key).strip()) % 26
    except ValueError:
        raise InvalidKeyFormatError(f"Shift key must be an integer, got {key!r}")


def coerce_shift(key: Key) -> int:
    """Like parse_shift, but falls back to the default shift on a bad key."""
    try:
        return parse_shift(key)
    except InvalidKeyFormatError as e:
        log_warn(f"{e}. Using default shift of {DEFAULT_SHIFT}.")
        return DEFAULT_SHIFT


register_cipher(CipherStrategy(
    algorithm=Algorithm.SHIFT,
    description=f"Caesar shift by N letters (numeric key, default {DEFAULT_SHIFT}).",
    requires_key=True,
    encrypt=lambda text, key: encrypt(text, coerce_shift(key)),
    decrypt=lambda text, key: decrypt(text, coerce_shift(key)),
))
