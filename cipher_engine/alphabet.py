import string

ALPHABET = string.ascii_uppercase
PADDING_LETTER = "X"


def is_letter(char: str) -> bool:
    """True for ASCII letters only; other alphabets pass through untouched."""
    return char in string.ascii_letters


def shift_letter(char: str, offset: int) -> str:
    """Move a single ASCII letter `offset` places along the alphabet, keeping its case."""
    base = ord("A") if char.isupper() else ord("a")
    return chr((ord(char) - base + offset) % 26 + base)


def letters_only(text: str) -> str:
    """Uppercase `text` and drop everything that is not A-Z."""
    return "".join(c for c in text.upper() if c in ALPHABET)


def index_of(char: str) -> int:
    return ord(char) - ord("A")


def letter_at(index: int) -> str:
    return ALPHABET[index % 26]
