"""
Single entry point over every registered cipher.

``encrypt`` and ``decrypt`` resolve the algorithm, check that a key is present
when the algorithm needs one and hand ``(text, key)`` to the bound strategy.
"""

from typing import List, Union

from . import ciphers  # noqa: F401  (registers every strategy)
from .errors import MissingKeyError, UnsupportedOperationError
from .log import log_info
from .registry import CIPHER_REGISTRY, Algorithm, CipherStrategy, Key

AlgorithmName = Union[str, Algorithm]


def get_strategy(algorithm: AlgorithmName) -> CipherStrategy:
    return CIPHER_REGISTRY[Algorithm.parse(algorithm)]


def requires_key(algorithm: AlgorithmName) -> bool:
    return get_strategy(algorithm).requires_key


def available_algorithms() -> List[CipherStrategy]:
    return [CIPHER_REGISTRY[a] for a in Algorithm if a in CIPHER_REGISTRY]


def _key_missing(key: Key) -> bool:
    return key is None or (isinstance(key, str) and not key.strip())


def _checked_strategy(algorithm: AlgorithmName, key: Key) -> CipherStrategy:
    strategy = get_strategy(algorithm)
    if strategy.requires_key and _key_missing(key):
        raise MissingKeyError(strategy.name)
    return strategy


def encrypt(text: str, key: Key, algorithm: AlgorithmName) -> str:
    strategy = _checked_strategy(algorithm, key)
    log_info(f"Encrypting {len(text)} character(s) with '{strategy.name}'.")
    return strategy.encrypt(text, key)


def decrypt(text: str, key: Key, algorithm: AlgorithmName) -> str:
    strategy = _checked_strategy(algorithm, key)
    if strategy.decrypt is None:
        raise UnsupportedOperationError(f"Decrypt not implemented for the '{strategy.name}' cipher")
    log_info(f"Decrypting {len(text)} character(s) with '{strategy.name}'.")
    return strategy.decrypt(text, key)
