[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherpad"
version = "0.1.0"
description = "Encrypt and decrypt text with AES-CBC and a 16-character key, from Python or a small desktop window."
requires-python = ">=3.10"
keywords = ["aes", "cbc", "pkcs7", "encryption", "decryption", "base64", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cipherpad = "cipherpad.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cipherpad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
