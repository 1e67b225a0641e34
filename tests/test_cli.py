import io
import sys

import pytest

from rc5cipher.__main__ import EXIT_CONFIG_ERROR, EXIT_INPUT_ERROR, main

KEY_HEX = "2bd6459f82c5b300952c49104881ff48"


def _feed_stdin(monkeypatch, data: bytes):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


def test_keygen(capsys):
    assert main(["keygen", "--size", "24"]) == 0
    out = capsys.readouterr().out.strip()
    assert len(bytes.fromhex(out)) == 24


def test_keygen_rejects_long_key(capsys):
    assert main(["keygen", "--size", "300"]) == EXIT_CONFIG_ERROR
    assert "error" in capsys.readouterr().err


def test_encrypt_hex_known_answer(monkeypatch, capsys):
    _feed_stdin(monkeypatch, b"EA024714AD5C4D84\n")
    assert main(["encrypt", "--key", KEY_HEX, "--padding", "none", "--hex"]) == 0
    assert capsys.readouterr().out.strip() == "11e43b86d231ea64"


def test_hex_roundtrip(monkeypatch, capsys):
    message = b"attack at dawn".hex().encode()
    _feed_stdin(monkeypatch, message)
    assert main(["encrypt", "--key", KEY_HEX, "--word-size", "64", "--rounds", "20", "--hex"]) == 0
    ciphertext = capsys.readouterr().out.strip()
    assert len(ciphertext) == 32

    _feed_stdin(monkeypatch, ciphertext.encode())
    assert main(["decrypt", "--key", KEY_HEX, "--word-size", "64", "--rounds", "20", "--hex"]) == 0
    assert bytes.fromhex(capsys.readouterr().out.strip()) == b"attack at dawn"


def test_unaligned_input_is_input_error(monkeypatch, capsys):
    _feed_stdin(monkeypatch, b"0102")
    assert main(["encrypt", "--key", KEY_HEX, "--padding", "none", "--hex"]) == EXIT_INPUT_ERROR
    assert "multiple of the block size" in capsys.readouterr().err


def test_long_key_is_config_error(monkeypatch, capsys):
    _feed_stdin(monkeypatch, b"")
    assert main(["encrypt", "--key", "00" * 256]) == EXIT_CONFIG_ERROR
    assert "255" in capsys.readouterr().err


def test_bad_hex_key(monkeypatch, capsys):
    _feed_stdin(monkeypatch, b"")
    assert main(["encrypt", "--key", "not-hex"]) == EXIT_CONFIG_ERROR


def test_unsupported_word_size_rejected_by_parser(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["encrypt", "--key", KEY_HEX, "--word-size", "128"])
    assert excinfo.value.code == 2


def test_unknown_log_level_falls_back(monkeypatch, capsys):
    monkeypatch.setenv("RC5_LOG_LEVEL", "loud")
    assert main(["keygen"]) == 0
    assert len(bytes.fromhex(capsys.readouterr().out.strip())) == 16
