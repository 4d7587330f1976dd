import string
from enum import Enum
from typing import List, Tuple

from .table import SIZE, Table, build_table, fold_letter, locate

FILLER = "X"


class CipherMode(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ==========================================
#  NORMALIZER: Letters to resolved digraphs
# ==========================================

def digraphs(text: str) -> List[Tuple[str, str]]:
    """
    Split `text` into Playfair digraphs.

    Only ASCII letters are kept, uppercased, with J folded into I.
    Pairs are resolved left to right: when both letters of a pair match,
    the pair becomes (letter, X) and the second letter starts the next
    pair. A lone trailing letter is padded with X.
    """
    letters = [fold_letter(c) for c in text if c in string.ascii_letters]
    pairs = []
    i = 0
    while i < len(letters):
        first = letters[i]
        if i + 1 < len(letters) and letters[i + 1] != first:
            pairs.append((first, letters[i + 1]))
            i += 2
        else:
            pairs.append((first, FILLER))
            i += 1
    return pairs


def normalize(text: str) -> List[str]:
    """Flattened `digraphs`: the even-length letter sequence the cipher consumes."""
    return [c for pair in digraphs(text) for c in pair]


# ==========================================
#  ENGINE: Row / column / rectangle rules
# ==========================================

def _substitute(a: str, b: str, table: Table, shift: int) -> str:
    r1, c1 = locate(table, a)
    r2, c2 = locate(table, b)
    if r1 == r2:
        return table.cell(r1, (c1 + shift) % SIZE) + table.cell(r2, (c2 + shift) % SIZE)
    if c1 == c2:
        return table.cell((r1 + shift) % SIZE, c1) + table.cell((r2 + shift) % SIZE, c2)
    # Rectangle: each letter keeps its row and takes the other's column.
    return table.cell(r1, c2) + table.cell(r2, c1)


def cipher(text: str, table: Table, mode: CipherMode) -> str:
    """
    Encrypt or decrypt `text` with `table`.

    The result always has the length of the normalized input, fillers
    included, so decrypting an encryption returns the padded plaintext
    (HELLO -> GYIZSC -> HELXLO).
    """
    shift = 1 if mode is CipherMode.ENCRYPT else -1
    return "".join(_substitute(a, b, table, shift) for a, b in digraphs(text))


def encrypt(text: str, table: Table) -> str:
    return cipher(text, table, CipherMode.ENCRYPT)


def decrypt(text: str, table: Table) -> str:
    return cipher(text, table, CipherMode.DECRYPT)


class PlayfairCipher:
    """A keyed Playfair cipher: the table is built once and reused."""

    name = "playfair"
    description = "Classical Playfair digraph substitution over a 5x5 key square."

    def __init__(self, key: str):
        self.key = key
        self.table = build_table(key)

    def encode(self, text: str) -> str:
        return encrypt(text, self.table)

    def decode(self, text: str) -> str:
        return decrypt(text, self.table)

    def run(self, text: str, mode: CipherMode) -> str:
        return cipher(text, self.table, mode)

    def __repr__(self) -> str:
        return f"PlayfairCipher(key={self.key!r})"
