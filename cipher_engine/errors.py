class CipherError(ValueError):
    """Base class for every error raised by the cipher engine."""


class MissingKeyError(CipherError):
    """A key is required by the algorithm but none (or a blank one) was given."""

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(f"Please enter a key for {algorithm.upper()} cipher!")


class UnknownAlgorithmError(CipherError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown algorithm '{name}'")


class UnsupportedOperationError(CipherError):
    pass


class InvalidKeyError(CipherError):
    pass


class InvalidKeyFormatError(InvalidKeyError):
    """Key has the wrong shape, e.g. a non-numeric shift."""


class InvalidTextError(CipherError):
    pass


class DecryptionError(CipherError):
    pass
