"""
Toy "asymmetric" mode carried over from the original web tool.

This is NOT public-key cryptography. The plaintext and key are joined and
base64-encoded, so anyone can read the text back. Keep it for demonstrations.
"""

import base64
import binascii

from ..errors import DecryptionError
from ..registry import Algorithm, CipherStrategy, register_cipher
from .modern import INVALID_KEY_MESSAGE

SEPARATOR = "::"


def encrypt(text: str, key: str) -> str:
    return base64.b64encode((text + SEPARATOR + key).encode("utf-8")).decode("ascii")


def decrypt(blob: str, key: str) -> str:
    try:
        decoded = base64.b64decode(blob.strip(), validate=True).decode("utf-8")
    except (binascii.Error, ValueError):
        raise DecryptionError(INVALID_KEY_MESSAGE)
    suffix = SEPARATOR + key
    if not decoded.endswith(suffix):
        raise DecryptionError(INVALID_KEY_MESSAGE)
    return decoded[:-len(suffix)]


register_cipher(CipherStrategy(
    algorithm=Algorithm.ASYMMETRIC_DEMO,
    description="DEMO ONLY: base64 of text::key. Not encryption, offers no secrecy.",
    requires_key=True,
    encrypt=lambda text, key: encrypt(text, str(key)),
    decrypt=lambda text, key: decrypt(text, str(key)),
))
