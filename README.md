# cipherpad

cipherpad encrypts and decrypts short pieces of text with AES in CBC mode
and PKCS7 padding. The key is a UTF-8 string. The result is Base64 text
that starts with a random 16-byte IV, followed by the ciphertext.

## Installation

```
pip install .
```

The desktop window uses `tkinter` from the standard library. Your Python
installation must include Tk for the window to open. The library functions
work without it.

## The desktop window

```
cipherpad
```

This opens a window with two sections:

- **Encrypt Text**: enter the plaintext and a key of exactly 16 characters,
  then press *Encrypt*. The Base64 result appears under "Encrypted Text".
- **Decrypt Text**: paste the encrypted text and the same key, then press
  *Decrypt*. The original text appears under "Decrypted Text".

When something goes wrong, the window shows a message box. This happens
when a field is empty, when the key is not 16 characters long, or when
decryption fails. Decryption fails, for example, on invalid Base64, on
input of the wrong length, or on the wrong key.

The command takes no options apart from `--help`.

## Library use

```python
import secrets

from cipherpad.cipher import encrypt, decrypt

key = secrets.token_hex(8)        # 16 characters -> AES-128
token = encrypt("hello world", key)
assert decrypt(token, key) == "hello world"
```

### `encrypt` and `decrypt`

`cipherpad.cipher.encrypt(plain_text, key)` and
`cipherpad.cipher.decrypt(cipher_text, key)`:

- Accept any key whose UTF-8 encoding is 16, 24 or 32 bytes long, which
  gives AES-128, AES-192 or AES-256. Any other key raises `ValueError`.
- `encrypt` uses a new random IV on every call, so encrypting the same
  text twice gives different output.
- `decrypt` ignores whitespace in its input.
- `decrypt` raises `ValueError` on invalid Base64, on data shorter than
  an IV, on a length that is not a whole number of blocks, and on invalid
  padding. Invalid padding usually means a wrong key or corrupted data.
- Bytes that are not valid UTF-8 after decryption come out as
  replacement characters.

### Input checks

`cipherpad.app.run_encrypt(plain_text, key)` and
`cipherpad.app.run_decrypt(cipher_text, key)` apply the same checks as the
window before they call the functions above:

- Both arguments must be non-empty.
- The key must be exactly 16 characters long.

When a check fails they raise `cipherpad.app.InputError`, a subclass of
`ValueError`. Decryption errors come through as the `ValueError` raised by
`decrypt`.

`cipherpad.app.EncryptionWindow(root)` builds the form on a Tk root
window. `cipherpad.app.main()` creates the root window and runs it.

## What it does not do

cipherpad does not read or write files. It does not derive keys from
passphrases and does not authenticate the ciphertext. The window works
only with text typed or pasted into it.

## Running the tests

```
pip install ".[test]"
pytest
```