"""
Digraph (Playfair) cipher.

The keyword seeds a 5x5 grid of 25 letters (J shares a cell with I). Text is
split into pairs of distinct letters and each pair is replaced according to
where its letters sit in the grid.
"""

from typing import List, Tuple

from ..alphabet import PADDING_LETTER, letters_only
from ..errors import InvalidTextError
from ..registry import Algorithm, CipherStrategy, register_cipher

GRID_ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"
ALTERNATE_PADDING = "Q"


def build_table(key: str) -> str:
    """Return the 25 grid letters in row-major order."""
    seed = prepare(key) + GRID_ALPHABET
    return "".join(dict.fromkeys(seed))


def prepare(text: str) -> str:
    return letters_only(text).replace("J", "I")


def _padding_for(letter: str) -> str:
    return ALTERNATE_PADDING if letter == PADDING_LETTER else PADDING_LETTER


def pairs(text: str) -> List[Tuple[str, str]]:
    """Split prepared text into digraphs, never pairing a letter with itself."""
    result = []
    i = 0
    while i < len(text):
        a = text[i]
        b = text[i + 1] if i + 1 < len(text) else None
        if b is None or a == b:
            # Pad and re-read b as the start of the next pair
            result.append((a, _padding_for(a)))
            i += 1
        else:
            result.append((a, b))
            i += 2
    return result


def _transform(digraphs, table: str, step: int) -> str:
    result = []
    for a, b in digraphs:
        r1, c1 = divmod(table.index(a), 5)
        r2, c2 = divmod(table.index(b), 5)
        if r1 == r2:
            result.append(table[r1 * 5 + (c1 + step) % 5] + table[r2 * 5 + (c2 + step) % 5])
        elif c1 == c2:
            result.append(table[((r1 + step) % 5) * 5 + c1] + table[((r2 + step) % 5) * 5 + c2])
        else:
            result.append(table[r1 * 5 + c2] + table[r2 * 5 + c1])
    return "".join(result)


def encrypt(text: str, key: str) -> str:
    return _transform(pairs(prepare(text)), build_table(key), 1)


def decrypt(text: str, key: str) -> str:
    text = prepare(text)
    if len(text) % 2:
        raise InvalidTextError("Digraph ciphertext must have an even number of letters")
    digraphs = [(text[i], text[i + 1]) for i in range(0, len(text), 2)]
    return _transform(digraphs, build_table(key), 4)


register_cipher(CipherStrategy(
    algorithm=Algorithm.DIGRAPH,
    description="Playfair cipher on a 5x5 keyword grid (I and J merged).",
    requires_key=True,
    encrypt=lambda text, key: encrypt(text, str(key)),
    decrypt=lambda text, key: decrypt(text, str(key)),
))
