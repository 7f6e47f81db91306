from enum import Enum
from typing import Callable, Dict, NamedTuple, Optional, Union

from .errors import UnknownAlgorithmError
from .log import log_warn

Key = Union[str, int, None]
Transform = Callable[[str, Key], str]

# ==========================================
#  FRAMEWORK: Closed Algorithm Set & Registry
# ==========================================


class Algorithm(str, Enum):
    SHIFT = "shift"
    SUBSTITUTION = "substitution"
    POLYALPHABETIC = "polyalphabetic"
    MATRIX = "matrix"
    DIGRAPH = "digraph"
    SYMMETRIC_MODERN_A = "symmetric-modern-a"
    SYMMETRIC_MODERN_B = "symmetric-modern-b"
    ASYMMETRIC_DEMO = "asymmetric-demo"

    @classmethod
    def parse(cls, name: Union[str, "Algorithm"]) -> "Algorithm":
        """Resolve a canonical or legacy algorithm name."""
        if isinstance(name, cls):
            return name
        normalized = str(name).strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            pass
        if normalized in LEGACY_NAMES:
            return LEGACY_NAMES[normalized]
        raise UnknownAlgorithmError(str(name))


# Names used by the original web form
LEGACY_NAMES = {
    "caesar": Algorithm.SHIFT,
    "monoalpha": Algorithm.SUBSTITUTION,
    "polyalpha": Algorithm.POLYALPHABETIC,
    "vigenere": Algorithm.POLYALPHABETIC,
    "hill": Algorithm.MATRIX,
    "playfair": Algorithm.DIGRAPH,
    "aes": Algorithm.SYMMETRIC_MODERN_A,
    "des": Algorithm.SYMMETRIC_MODERN_B,
    "rsa": Algorithm.ASYMMETRIC_DEMO,
}


class CipherStrategy(NamedTuple):
    """An encrypt/decrypt function pair bound to one algorithm.

    Both functions take ``(text, key)``. Algorithms that ignore the key still
    accept it so the engine can call every strategy the same way. ``decrypt``
    is ``None`` when the algorithm has no inverse.
    """

    algorithm: Algorithm
    description: str
    requires_key: bool
    encrypt: Transform
    decrypt: Optional[Transform]

    @property
    def name(self) -> str:
        return self.algorithm.value


CIPHER_REGISTRY: Dict[Algorithm, CipherStrategy] = {}


def register_cipher(strategy: CipherStrategy) -> CipherStrategy:
    """Add a strategy to the registry. Each algorithm may be bound once."""
    if strategy.algorithm in CIPHER_REGISTRY:
        raise ValueError(f"Cipher '{strategy.name}' is already registered")
    CIPHER_REGISTRY[strategy.algorithm] = strategy
    return strategy


def keyless(transform: Callable[[str], str], label: str) -> Transform:
    """Adapt a key-free transform to the (text, key) strategy signature."""
    def run(text: str, key: Key) -> str:
        if key:
            log_warn(f"{label} takes no key. The key is ignored.")
        return transform(text)
    return run
