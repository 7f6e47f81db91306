import pytest

from cipher_engine.ciphers import matrix
from cipher_engine.errors import InvalidKeyError, InvalidTextError


def test_inverse_pair():
    assert matrix.inverse_matrix(matrix.KEY_MATRIX) == matrix.INVERSE_MATRIX
    (a, b), (c, d) = matrix.INVERSE_MATRIX
    (e, f), (g, h) = matrix.KEY_MATRIX
    product = (((a * e + b * g) % 26, (a * f + b * h) % 26),
               ((c * e + d * g) % 26, (c * f + d * h) % 26))
    assert product == ((1, 0), (0, 1))


def test_help_vector():
    assert matrix.encrypt("help") == "HIAT"
    assert matrix.decrypt("HIAT") == "HELP"


def test_tidy_strips_and_pads():
    assert matrix.tidy("Hi, you!") == "HIYOUX"
    assert matrix.encrypt("Hi, you!") == matrix.encrypt("HIYOUX")


@pytest.mark.parametrize("plain", ["AB", "ZZ", "SHORTEXAMPLE", "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOGS"])
def test_round_trip(plain):
    assert matrix.decrypt(matrix.encrypt(plain)) == plain


def test_decrypt_does_not_tidy():
    with pytest.raises(InvalidTextError):
        matrix.decrypt("HIA")
    with pytest.raises(InvalidTextError):
        matrix.decrypt("HI AT")


def test_singular_matrix_rejected():
    with pytest.raises(InvalidKeyError):
        matrix.inverse_matrix(((2, 4), (1, 2)))
