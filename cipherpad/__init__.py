"""AES-CBC text encryption with Base64 output and a small Tk desktop window."""

__version__ = "0.1.0"
__all__ = ["__version__"]