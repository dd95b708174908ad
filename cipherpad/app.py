"""Desktop window for encrypting and decrypting text with a 16-character key."""

from __future__ import annotations

import argparse

from cipherpad.cipher import decrypt, encrypt

KEY_LENGTH = 16

_MISSING_ENCRYPT = "You need to enter plaintext or the key or both."
_MISSING_DECRYPT = "You need to enter encrypted text or the key or both."
_BAD_KEY = "You need to enter a key of length 16."


class InputError(ValueError):
    """Raised when the form input is missing or has the wrong shape."""


def _check_key(key: str) -> None:
    if len(key) != KEY_LENGTH:
        raise InputError(_BAD_KEY)


def run_encrypt(plain_text: str, key: str) -> str:
    """Validate form input and encrypt it."""
    if not plain_text or not key:
        raise InputError(_MISSING_ENCRYPT)
    _check_key(key)
    return encrypt(plain_text, key)


def run_decrypt(cipher_text: str, key: str) -> str:
    """Validate form input and decrypt it."""
    if not cipher_text or not key:
        raise InputError(_MISSING_DECRYPT)
    _check_key(key)
    return decrypt(cipher_text, key)


class EncryptionWindow:
    """Two-panel form: encrypt text on top, decrypt text below."""

    def __init__(self, root):
        import tkinter as tk
        from tkinter import font as tkfont

        self._tk = tk
        self.root = root
        root.title("Encryption")

        title_font = tkfont.Font(family="MS Reference Sans Serif", size=12, weight="bold")

        def text_box(width, height):
            return tk.Text(root, width=width, height=height, wrap="word")

        tk.Label(root, text="Encrypt Text", font=title_font).grid(
            row=0, column=0, columnspan=3, pady=(10, 5)
        )
        tk.Label(root, text="Enter Plaintext").grid(row=1, column=0)
        tk.Label(root, text="Key").grid(row=1, column=1)
        tk.Label(root, text="Encrypted Text").grid(row=1, column=2)

        self.plain_input = text_box(30, 12)
        self.plain_input.grid(row=2, column=0, rowspan=2, padx=10, pady=5)
        self.encrypt_key = text_box(16, 3)
        self.encrypt_key.grid(row=2, column=1, padx=10, pady=5)
        tk.Button(root, text="Encrypt", command=self.on_encrypt).grid(
            row=3, column=1, padx=10, pady=5
        )
        self.encrypted_output = text_box(30, 12)
        self.encrypted_output.grid(row=2, column=2, rowspan=2, padx=10, pady=5)

        tk.Label(root, text="Decrypt Text", font=title_font).grid(
            row=4, column=0, columnspan=3, pady=(20, 5)
        )
        tk.Label(root, text="Enter Encrypted Text").grid(row=5, column=0)
        tk.Label(root, text="Key").grid(row=5, column=1)
        tk.Label(root, text="Decrypted Text").grid(row=5, column=2)

        self.cipher_input = text_box(30, 12)
        self.cipher_input.grid(row=6, column=0, rowspan=2, padx=10, pady=5)
        self.decrypt_key = text_box(16, 3)
        self.decrypt_key.grid(row=6, column=1, padx=10, pady=5)
        tk.Button(root, text="Decrypt", command=self.on_decrypt).grid(
            row=7, column=1, padx=10, pady=5
        )
        self.decrypted_output = text_box(30, 12)
        self.decrypted_output.grid(row=6, column=2, rowspan=2, padx=10, pady=(5, 10))

    @staticmethod
    def _read(widget) -> str:
        return widget.get("1.0", "end-1c")

    def _write(self, widget, value: str) -> None:
        widget.delete("1.0", self._tk.END)
        widget.insert("1.0", value)

    def _report(self, message: str) -> None:
        from tkinter import messagebox

        messagebox.showinfo("Encryption", message, parent=self.root)

    def on_encrypt(self) -> None:
        """Encrypt the plaintext box with the key box and show the result."""
        try:
            result = run_encrypt(self._read(self.plain_input), self._read(self.encrypt_key))
        except Exception as exc:  # shown to the user, as the form does for any failure
            self._report(str(exc))
            return
        self._write(self.encrypted_output, result)

    def on_decrypt(self) -> None:
        """Decrypt the ciphertext box with the key box and show the result."""
        try:
            result = run_decrypt(self._read(self.cipher_input), self._read(self.decrypt_key))
        except Exception as exc:  # shown to the user, as the form does for any failure
            self._report(str(exc))
            return
        self._write(self.decrypted_output, result)


def main(argv=None) -> int:
    """Open the encryption window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="cipherpad",
        description="Encrypt and decrypt text with AES and a 16-character key.",
    )
    parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    EncryptionWindow(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())