import pytest

from cipher_engine.ciphers import polyalphabetic
from cipher_engine.errors import InvalidKeyError


def test_lemon_vector():
    assert polyalphabetic.encrypt("ATTACKATDAWN", "LEMON") == "LXFOPVEFRNHR"
    assert polyalphabetic.decrypt("LXFOPVEFRNHR", "lemon") == "ATTACKATDAWN"


def test_non_letters_do_not_advance_key():
    assert polyalphabetic.encrypt("attack at dawn!", "LEMON") == "lxfopv ef rnhr!"


@pytest.mark.parametrize("key", ["A", "KEY", "Secret", "zzzz"])
def test_round_trip(key):
    text = "Polyalphabetic Ciphers, Since 1553."
    assert polyalphabetic.decrypt(polyalphabetic.encrypt(text, key), key) == text


@pytest.mark.parametrize("key", ["", "123 !"])
def test_key_without_letters(key):
    with pytest.raises(InvalidKeyError):
        polyalphabetic.encrypt("hello", key)
