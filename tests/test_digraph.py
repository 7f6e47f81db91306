import pytest

from cipher_engine.ciphers import digraph
from cipher_engine.errors import InvalidTextError


def test_build_table():
    table = digraph.build_table("PLAYFAIREXAMPLE")
    assert table == "PLAYFIREXMBCDGHKNOQSTUVWZ"
    assert len(set(table)) == 25
    assert "J" not in digraph.build_table("JUMBLE")


def test_pairs_split_doubles_and_pad():
    assert digraph.pairs("TREES") == [("T", "R"), ("E", "X"), ("E", "S")]
    assert digraph.pairs("ABC") == [("A", "B"), ("C", "X")]
    assert digraph.pairs("XX") == [("X", "Q"), ("X", "Q")]


def test_canonical_example():
    ciphertext = digraph.encrypt("HIDE THE GOLD IN THE TREE STUMP", "PLAYFAIREXAMPLE")
    assert ciphertext == "BMODZBXDNABEKUDMUIXMMOUVIF"
    assert digraph.decrypt(ciphertext, "PLAYFAIREXAMPLE") == "HIDETHEGOLDINTHETREXESTUMP"


def test_same_row_and_column():
    # Row 0 is P L A Y F, column 0 is P I B K T
    assert digraph.encrypt("PL", "PLAYFAIREXAMPLE") == "LA"
    assert digraph.encrypt("FP", "PLAYFAIREXAMPLE") == "PL"
    assert digraph.encrypt("PI", "PLAYFAIREXAMPLE") == "IB"
    assert digraph.encrypt("TP", "PLAYFAIREXAMPLE") == "PI"


@pytest.mark.parametrize("key", ["MONARCHY", "keyword", "Jazz"])
def test_round_trip(key):
    text = "WEAREDISCOVEREDSAVEYOURSELF"
    assert digraph.decrypt(digraph.encrypt(text, key), key) == text + "X"


def test_decrypt_rejects_odd_length():
    with pytest.raises(InvalidTextError):
        digraph.decrypt("ABC", "KEY")
