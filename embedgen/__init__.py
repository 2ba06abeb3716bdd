"""Embed files into C source and header files, retrievable by filename at runtime."""

__version__ = '1.0.0'
