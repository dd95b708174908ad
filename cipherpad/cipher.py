"""AES-CBC text encryption with a random IV carried in front of the ciphertext."""

from __future__ import annotations

import base64
import binascii
import os

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

_BLOCK_BYTES = 16
_VALID_KEY_BYTES = (16, 24, 32)


def _key_bytes(key: str) -> bytes:
    raw = key.encode("utf-8")
    if len(raw) not in _VALID_KEY_BYTES:
        raise ValueError(
            f"key must encode to 16, 24 or 32 bytes of UTF-8, got {len(raw)}"
        )
    return raw


def encrypt(plain_text: str, key: str) -> str:
    """Encrypt text with AES-CBC and PKCS7 padding.

    Returns base64 of the random 16-byte IV followed by the ciphertext.
    """
    key_raw = _key_bytes(key)
    iv = os.urandom(_BLOCK_BYTES)

    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(plain_text.encode("utf-8")) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key_raw), modes.CBC(iv)).encryptor()
    body = encryptor.update(padded) + encryptor.finalize()

    return base64.b64encode(iv + body).decode("ascii")


def decrypt(cipher_text: str, key: str) -> str:
    """Decrypt base64 text produced by :func:`encrypt`.

    Raises ValueError for a bad key, malformed base64, a ciphertext of the
    wrong length, or invalid padding.
    """
    key_raw = _key_bytes(key)

    compact = "".join(cipher_text.split())
    try:
        combined = base64.b64decode(compact, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"ciphertext is not valid base64: {exc}") from exc

    if len(combined) < _BLOCK_BYTES:
        raise ValueError("ciphertext is too short to contain an IV")
    iv, body = combined[:_BLOCK_BYTES], combined[_BLOCK_BYTES:]
    if len(body) % _BLOCK_BYTES:
        raise ValueError("ciphertext length is not a multiple of the block size")

    decryptor = Cipher(algorithms.AES(key_raw), modes.CBC(iv)).decryptor()
    padded = decryptor.update(body) + decryptor.finalize()

    unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
    try:
        plain = unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        raise ValueError("padding is invalid; wrong key or corrupted data") from exc

    return plain.decode("utf-8-sig", errors="replace")