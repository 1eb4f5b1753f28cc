"""Shift-by-three letter cipher and the commands that write and read it."""

import string
import sys

from .files import write_words

_LOWER = string.ascii_lowercase
_UPPER = string.ascii_uppercase
_SHIFT = 3

_ENCRYPT = str.maketrans(
    _LOWER + _UPPER,
    _LOWER[_SHIFT:] + _LOWER[:_SHIFT] + _UPPER[_SHIFT:] + _UPPER[:_SHIFT],
)
_DECRYPT = str.maketrans(
    _LOWER + _UPPER,
    _LOWER[-_SHIFT:] + _LOWER[:-_SHIFT] + _UPPER[-_SHIFT:] + _UPPER[:-_SHIFT],
)


def _single(c):
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def encrypt_char(c):
    """Shift an ASCII letter three places forward; leave anything else alone."""
    return _single(c).translate(_ENCRYPT)


def decrypt_char(c):
    """Shift an ASCII letter three places back; leave anything else alone."""
    return _single(c).translate(_DECRYPT)


def encrypt(text):
    """Encrypt every letter of ``text``."""
    return text.translate(_ENCRYPT)


def decrypt(text):
    """Decrypt every letter of ``text``."""
    return text.translate(_DECRYPT)


def rahasiabanget_main(argv=None):
    """Write the encrypted words to a file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        sys.stderr.write("Usage: ./rahasiabanget <filename> <text to encrypt>\n")
        return 1
    filename, words = args[0], args[1:]
    try:
        write_words(filename, [encrypt(word) for word in words])
    except OSError as exc:
        sys.stderr.write(f"open: {exc.strerror or exc}\n")
        return 1
    sys.stdout.write("File created and encrypted.\n")
    return 0


def bacapikiran_main(argv=None):
    """Print the decrypted contents of a file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write("Usage: ./bacapikiran <encrypted filename>\n")
        return 1
    try:
        with open(args[0], encoding="utf-8", errors="replace", newline="") as fh:
            for chunk in iter(lambda: fh.read(1024), ""):
                sys.stdout.write(decrypt(chunk))
    except OSError as exc:
        sys.stderr.write(f"open: {exc.strerror or exc}\n")
        return 1
    return 0