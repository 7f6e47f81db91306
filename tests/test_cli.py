import pytest

from cipher_engine import cli, log


@pytest.fixture(autouse=True)
def quiet():
    yield
    log.set_verbose(False)


def run(capsys, *argv):
    cli.main(list(argv))
    return capsys.readouterr().out.rstrip("\n")


def test_encrypt_text(capsys):
    assert run(capsys, "-e", "-a", "caesar", "-k", "3", "-t", "Hello, World!") == "Khoor, Zruog!"


def test_decrypt_text(capsys):
    out = run(capsys, "-d", "-a", "playfair", "-k", "PLAYFAIREXAMPLE", "-t", "BMODZBXDNABEKUDMUIXMMOUVIF")
    assert out == "HIDETHEGOLDINTHETREXESTUMP"


def test_list(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-l"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "asymmetric-demo" in out
    assert "Total: 8 cipher(s) registered." in out


def test_missing_key_exits():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-e", "-a", "polyalphabetic", "-t", "hi"])
    assert excinfo.value.code == "Encrypt Error: Please enter a key for POLYALPHABETIC cipher!"


def test_wrong_key_reports_invalid_key(capsys):
    blob = run(capsys, "-e", "-a", "rsa", "-k", "alice", "-t", "hello")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-d", "-a", "rsa", "-k", "bob", "-t", blob])
    assert excinfo.value.code == "Decrypt Error: Invalid Key!"


def test_unknown_algorithm_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-e", "-a", "enigma", "-t", "hi"])
    assert excinfo.value.code == 2
    assert "Unknown algorithm 'enigma'" in capsys.readouterr().err


def test_file_round_trip(tmp_path, capsys):
    plain = tmp_path / "plain.txt"
    secret = tmp_path / "output.txt"
    plain.write_text("Meet at noon", encoding="utf-8")

    cli.main(["-e", "-a", "aes", "-k", "pw", "-i", str(plain), "-o", str(secret)])
    assert run(capsys, "-d", "-a", "aes", "-k", "pw", "-i", str(secret)) == "Meet at noon"


def test_missing_input_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-e", "-i", str(tmp_path / "nope.txt"), "-k", "1"])
    assert "not found" in excinfo.value.code


def test_verbose_warning_on_bad_shift(capsys):
    cli.main(["-e", "-v", "-a", "shift", "-k", "abc", "-t", "abc"])
    captured = capsys.readouterr()
    assert captured.out == "def\n"
    assert "[WARN] Shift key must be an integer" in captured.err
