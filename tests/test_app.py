import string

import pytest

from cipherpad.app import InputError, run_decrypt, run_encrypt

SAMPLE_KEY = string.ascii_letters[:16]


def test_encrypt_then_decrypt_round_trip():
    sealed = run_encrypt("meet at noon", SAMPLE_KEY)
    assert run_decrypt(sealed, SAMPLE_KEY) == "meet at noon"


def test_encrypt_requires_plaintext():
    with pytest.raises(InputError, match="You need to enter plaintext or the key or both."):
        run_encrypt("", SAMPLE_KEY)


def test_encrypt_requires_key():
    with pytest.raises(InputError, match="You need to enter plaintext or the key or both."):
        run_encrypt("text", "")


def test_decrypt_requires_ciphertext():
    with pytest.raises(InputError, match="You need to enter encrypted text or the key or both."):
        run_decrypt("", SAMPLE_KEY)


def test_decrypt_requires_key():
    sealed = run_encrypt("text", SAMPLE_KEY)
    with pytest.raises(InputError, match="You need to enter encrypted text or the key or both."):
        run_decrypt(sealed, "")


@pytest.mark.parametrize("key", ["a" * 15, "a" * 17, "a" * 24, "a" * 32])
def test_encrypt_requires_key_of_sixteen(key):
    with pytest.raises(InputError, match="You need to enter a key of length 16."):
        run_encrypt("text", key)


@pytest.mark.parametrize("key", ["a" * 15, "a" * 32])
def test_decrypt_requires_key_of_sixteen(key):
    sealed = run_encrypt("text", SAMPLE_KEY)
    with pytest.raises(InputError, match="You need to enter a key of length 16."):
        run_decrypt(sealed, key)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        run_encrypt("", "")


def test_decrypt_garbage_raises_value_error():
    with pytest.raises(ValueError):
        run_decrypt("!!!not base64!!!", SAMPLE_KEY)