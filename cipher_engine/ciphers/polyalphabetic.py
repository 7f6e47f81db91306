"""
Polyalphabetic (Vigenere) cipher.

The key only advances on letters, so spaces and punctuation in the text do
not shift the alignment between text and key.
"""

from ..alphabet import index_of, is_letter, letters_only, shift_letter
from ..errors import InvalidKeyError
from ..registry import Algorithm, CipherStrategy, register_cipher


def _key_offsets(key: str) -> list:
    offsets = [index_of(c) for c in letters_only(key)]
    if not offsets:
        raise InvalidKeyError("Polyalphabetic key must contain at least one letter")
    return offsets


def _apply(text: str, key: str, direction: int) -> str:
    offsets = _key_offsets(key)
    result = []
    k = 0
    for char in text:
        if is_letter(char):
            result.append(shift_letter(char, direction * offsets[k % len(offsets)] + 26))
            k += 1
        else:
            result.append(char)
    return "".join(result)


def encrypt(text: str, key: str) -> str:
    return _apply(text, key, 1)


def decrypt(text: str, key: str) -> str:
    return _apply(text, key, -1)


register_cipher(CipherStrategy(
    algorithm=Algorithm.POLYALPHABETIC,
    description="Vigenere cipher keyed by a repeating word.",
    requires_key=True,
    encrypt=lambda text, key: encrypt(text, str(key)),
    decrypt=lambda text, key: decrypt(text, str(key)),
))
