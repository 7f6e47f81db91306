"""
Matrix (Hill) cipher with a fixed 2x2 key over Z/26.

Letters are tidied into uppercase pairs and each pair (a, b) is multiplied by
the key matrix. Decryption multiplies by the modular inverse of the key.
"""

from typing import List, Tuple

from ..alphabet import ALPHABET, PADDING_LETTER, index_of, letter_at, letters_only
from ..errors import InvalidKeyError, InvalidTextError
from ..registry import Algorithm, CipherStrategy, keyless, register_cipher

Matrix = Tuple[Tuple[int, int], Tuple[int, int]]

KEY_MATRIX: Matrix = ((3, 3), (2, 5))
INVERSE_MATRIX: Matrix = ((15, 17), (20, 9))


def inverse_matrix(matrix: Matrix) -> Matrix:
    """Return the inverse of a 2x2 matrix modulo 26."""
    (a, b), (c, d) = matrix
    det = (a * d - b * c) % 26
    try:
        det_inv = pow(det, -1, 26)
    except ValueError:
        raise InvalidKeyError(f"Matrix {matrix} is not invertible mod 26 (determinant {det})")
    return (
        ((det_inv * d) % 26, (-det_inv * b) % 26),
        ((-det_inv * c) % 26, (det_inv * a) % 26),
    )


def tidy(text: str) -> str:
    """Uppercase, drop non-letters and pad to an even length."""
    text = letters_only(text)
    if len(text) % 2:
        text += PADDING_LETTER
    return text


def _multiply_pairs(text: str, matrix: Matrix) -> str:
    (m00, m01), (m10, m11) = matrix
    result: List[str] = []
    for i in range(0, len(text), 2):
        a, b = index_of(text[i]), index_of(text[i + 1])
        result.append(letter_at(m00 * a + m01 * b))
        result.append(letter_at(m10 * a + m11 * b))
    return "".join(result)


def encrypt(text: str, matrix: Matrix = KEY_MATRIX) -> str:
    return _multiply_pairs(tidy(text), matrix)


def decrypt(text: str, inverse: Matrix = INVERSE_MATRIX) -> str:
    # Input is taken as-is: no stripping or padding on the way back.
    text = text.upper()
    if len(text) % 2 or any(c not in ALPHABET for c in text):
        raise InvalidTextError("Matrix ciphertext must be an even number of letters A-Z")
    return _multiply_pairs(text, inverse)


register_cipher(CipherStrategy(
    algorithm=Algorithm.MATRIX,
    description="Hill cipher with the fixed matrix [[3,3],[2,5]] (no key, letters only).",
    requires_key=False,
    encrypt=keyless(encrypt, "Matrix cipher (fixed matrix)"),
    decrypt=keyless(decrypt, "Matrix cipher (fixed matrix)"),
))
