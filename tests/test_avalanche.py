import pytest

from rc5cipher.evaluation import hamming_distance, measure_avalanche


def test_hamming_distance():
    assert hamming_distance(b"\x00\x00", b"\x00\x00") == 0
    assert hamming_distance(b"\xFF\x00", b"\x00\x00") == 8
    assert hamming_distance(b"\x01\x80", b"\x00\x00") == 2


@pytest.mark.parametrize("word_size", [16, 32, 64])
@pytest.mark.parametrize("input_type", ["plaintext", "key"])
def test_full_rounds_avalanche(word_size, input_type):
    result = measure_avalanche(word_size=word_size, rounds=12, trials=200, input_type=input_type)
    assert result.num_trials == 200
    assert len(result.fractions) == 200
    assert result.passes, result.summary()


def test_zero_rounds_has_no_plaintext_avalanche():
    result = measure_avalanche(word_size=32, rounds=0, trials=200, input_type="plaintext")
    assert not result.passes
    assert result.mean_fraction < 0.2


def test_measurement_is_reproducible():
    a = measure_avalanche(trials=20, seed=42)
    b = measure_avalanche(trials=20, seed=42)
    assert a.fractions == b.fractions


def test_result_dict():
    result = measure_avalanche(word_size=16, rounds=4, trials=10)
    d = result.to_dict()
    assert d["word_size"] == 16
    assert d["rounds"] == 4
    assert d["input_type"] == "plaintext"
    assert d["passes"] == result.passes


def test_invalid_input_type():
    with pytest.raises(ValueError):
        measure_avalanche(input_type="ciphertext")
    with pytest.raises(ValueError):
        measure_avalanche(key_size=0, input_type="key")
