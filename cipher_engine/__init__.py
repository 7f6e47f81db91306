"""Classical and modern text ciphers behind one encrypt/decrypt interface."""

from .engine import available_algorithms, decrypt, encrypt, requires_key
from .errors import (
    CipherError,
    DecryptionError,
    InvalidKeyError,
    InvalidKeyFormatError,
    InvalidTextError,
    MissingKeyError,
    UnknownAlgorithmError,
    UnsupportedOperationError,
)
from .registry import Algorithm

__version__ = "1.0.0"

__all__ = [
    "Algorithm",
    "CipherError",
    "DecryptionError",
    "InvalidKeyError",
    "InvalidKeyFormatError",
    "InvalidTextError",
    "MissingKeyError",
    "UnknownAlgorithmError",
    "UnsupportedOperationError",
    "available_algorithms",
    "decrypt",
    "encrypt",
    "requires_key",
]
