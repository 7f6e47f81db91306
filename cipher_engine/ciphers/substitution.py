"""
Substitution (monoalphabetic) cipher over a fixed permutation table.

The text is uppercased before mapping, so case does not survive a round trip.
"""

from typing import Optional

from ..alphabet import ALPHABET, index_of
from ..errors import InvalidKeyError
from ..registry import Algorithm, CipherStrategy, keyless, register_cipher


def validate_table(table: str) -> str:
    """Return `table` uppercased if it is a permutation of A-Z."""
    table = table.upper()
    if len(table) != 26 or set(table) != set(ALPHABET):
        raise InvalidKeyError("Substitution table must be a permutation of the 26 letters A-Z")
    return table


SUBSTITUTION_TABLE = validate_table("QWERTYUIOPASDFGHJKLZXCVBNM")


def encrypt(text: str, table: Optional[str] = None) -> str:
    table = SUBSTITUTION_TABLE if table is None else validate_table(table)
    return "".join(table[index_of(c)] if c in ALPHABET else c for c in text.upper())


def decrypt(text: str, table: Optional[str] = None) -> str:
    table = SUBSTITUTION_TABLE if table is None else validate_table(table)
    return "".join(ALPHABET[table.index(c)] if c in ALPHABET else c for c in text.upper())


register_cipher(CipherStrategy(
    algorithm=Algorithm.SUBSTITUTION,
    description="Fixed QWERTY letter substitution (no key, output is uppercase).",
    requires_key=False,
    encrypt=keyless(encrypt, "Substitution cipher (fixed table)"),
    decrypt=keyless(decrypt, "Substitution cipher (fixed table)"),
))
