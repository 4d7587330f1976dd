"""
Playfair Cipher Suite

Builds a 5x5 Playfair table from a keyword and encrypts or decrypts text
one digraph at a time.
"""

__version__ = "1.0"

from .table import Position, Table, TableInvariantError, build_table, locate
from .engine import (
    CipherMode,
    PlayfairCipher,
    cipher,
    decrypt,
    encrypt,
    normalize,
)

__all__ = [
    "CipherMode",
    "PlayfairCipher",
    "Position",
    "Table",
    "TableInvariantError",
    "build_table",
    "cipher",
    "decrypt",
    "encrypt",
    "locate",
    "normalize",
]
