# Importing each module registers its strategy in CIPHER_REGISTRY.
from . import shift, substitution, polyalphabetic, matrix, digraph, modern, demo  # noqa: F401
