"""An interactive shell with built-in file, cipher, calculator and archive commands."""

__version__ = "0.1.0"