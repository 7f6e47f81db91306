"""
Passphrase-based AES and DES, delegated to pycryptodome.

Blobs use the OpenSSL "Salted__" layout that CryptoJS produces for
``CryptoJS.AES.encrypt(text, passphrase)``:

    base64( b"Salted__" + salt[8] + CBC ciphertext )

Key and IV come from EVP_BytesToKey (MD5, one iteration), so blobs are
interchangeable with CryptoJS and ``openssl enc -md md5``.
"""

import base64
import binascii
from typing import Optional, Tuple

from Crypto.Cipher import AES, DES
from Crypto.Hash import MD5
from Crypto.Random import get_random_bytes
from Crypto.Util.Padding import pad, unpad

from ..errors import DecryptionError
from ..log import log_info
from ..registry import Algorithm, CipherStrategy, register_cipher

SALT_HEADER = b"Salted__"
SALT_SIZE = 8
INVALID_KEY_MESSAGE = "Invalid Key!"


def evp_bytes_to_key(passphrase: bytes, salt: bytes, key_len: int, iv_len: int) -> Tuple[bytes, bytes]:
    """OpenSSL's EVP_BytesToKey with MD5 and a single iteration."""
    derived = b""
    block = b""
    while len(derived) < key_len + iv_len:
        block = MD5.new(block + passphrase + salt).digest()
        derived += block
    return derived[:key_len], derived[key_len:key_len + iv_len]


class PassphraseCipher:
    """A CBC block cipher keyed by a passphrase through EVP_BytesToKey."""

    def __init__(self, module, key_size: int):
        self.module = module
        self.key_size = key_size

    @property
    def block_size(self) -> int:
        return self.module.block_size

    def _new(self, passphrase: str, salt: bytes):
        key, iv = evp_bytes_to_key(passphrase.encode("utf-8"), salt, self.key_size, self.block_size)
        return self.module.new(key, self.module.MODE_CBC, iv=iv)

    def encrypt(self, text: str, passphrase: str, salt: Optional[bytes] = None) -> str:
        if salt is None:
            salt = get_random_bytes(SALT_SIZE)
        cipher = self._new(passphrase, salt)
        ct = cipher.encrypt(pad(text.encode("utf-8"), self.block_size))
        return base64.b64encode(SALT_HEADER + salt + ct).decode("ascii")

    def decrypt(self, blob: str, passphrase: str) -> str:
        try:
            raw = base64.b64decode(blob.strip(), validate=True)
        except (binascii.Error, ValueError):
            raise DecryptionError(INVALID_KEY_MESSAGE)

        if not raw.startswith(SALT_HEADER) or len(raw) < len(SALT_HEADER) + SALT_SIZE + self.block_size:
            log_info("Ciphertext is missing the Salted__ header or is truncated.")
            raise DecryptionError(INVALID_KEY_MESSAGE)

        salt = raw[len(SALT_HEADER):len(SALT_HEADER) + SALT_SIZE]
        body = raw[len(SALT_HEADER) + SALT_SIZE:]
        if len(body) % self.block_size:
            raise DecryptionError(INVALID_KEY_MESSAGE)

        try:
            plain = unpad(self._new(passphrase, salt).decrypt(body), self.block_size)
            return plain.decode("utf-8")
        except (ValueError, UnicodeDecodeError):
            raise DecryptionError(INVALID_KEY_MESSAGE)


AES_CIPHER = PassphraseCipher(AES, key_size=32)
DES_CIPHER = PassphraseCipher(DES, key_size=8)


def aes_encrypt(text: str, passphrase: str) -> str:
    return AES_CIPHER.encrypt(text, passphrase)


def aes_decrypt(blob: str, passphrase: str) -> str:
    return AES_CIPHER.decrypt(blob, passphrase)


def des_encrypt(text: str, passphrase: str) -> str:
    return DES_CIPHER.encrypt(text, passphrase)


def des_decrypt(blob: str, passphrase: str) -> str:
    return DES_CIPHER.decrypt(blob, passphrase)


register_cipher(CipherStrategy(
    algorithm=Algorithm.SYMMETRIC_MODERN_A,
    description="AES-256-CBC with a passphrase (CryptoJS/OpenSSL compatible).",
    requires_key=True,
    encrypt=lambda text, key: aes_encrypt(text, str(key)),
    decrypt=lambda text, key: aes_decrypt(text, str(key)),
))

register_cipher(CipherStrategy(
    algorithm=Algorithm.SYMMETRIC_MODERN_B,
    description="DES-CBC with a passphrase (CryptoJS/OpenSSL compatible, legacy strength).",
    requires_key=True,
    encrypt=lambda text, key: des_encrypt(text, str(key)),
    decrypt=lambda text, key: des_decrypt(text, str(key)),
))
