import string
from typing import Dict, Iterator, List, NamedTuple, Tuple

SIZE = 5
ALPHABET = string.ascii_uppercase

# The grid holds 25 letters, so J shares a cell with I.
MERGED_LETTER = "J"
MERGED_INTO = "I"


class TableInvariantError(AssertionError):
    """A letter that should be in the table was not found. Never user input."""
    pass


class Position(NamedTuple):
    row: int
    col: int


def fold_letter(c: str) -> str:
    """Uppercase a letter and fold J into I."""
    c = c.upper()
    return MERGED_INTO if c == MERGED_LETTER else c


# ==========================================
#  TABLE: Immutable 5x5 letter grid
# ==========================================

class Table:
    """
    A Playfair key square.

    Cells are stored flat, row-major, indexed by row * 5 + col.
    A reverse index from letter to Position is built once so lookups
    do not scan the grid.
    """

    __slots__ = ("_cells", "_positions")

    def __init__(self, cells: str):
        if (len(cells) != SIZE * SIZE or len(set(cells)) != SIZE * SIZE
                or not set(cells) <= set(ALPHABET) - {MERGED_LETTER}):
            raise ValueError(f"Table needs {SIZE * SIZE} distinct letters, got {cells!r}")
        self._cells = cells
        self._positions: Dict[str, Position] = {
            c: Position(*divmod(i, SIZE)) for i, c in enumerate(cells)
        }

    @property
    def cells(self) -> str:
        return self._cells

    @property
    def rows(self) -> List[List[str]]:
        """The grid as five lists of five letters, for display."""
        return [list(self._cells[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE)]

    def cell(self, row: int, col: int) -> str:
        return self._cells[row * SIZE + col]

    def position(self, c: str) -> Position:
        """Reverse lookup; raises KeyError for a letter not in the grid."""
        return self._positions[c]

    def __getitem__(self, pos: Tuple[int, int]) -> str:
        return self.cell(*pos)

    def __contains__(self, c: object) -> bool:
        return c in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"Table({self._cells!r})"


def build_table(key: str) -> Table:
    """
    Build the key square for `key`.

    Key letters come first in order of appearance, then the rest of the
    alphabet. Non-letters and repeats are skipped, J counts as I.
    Any string is accepted; an empty key gives the plain alphabet.
    """
    seen = []
    for c in key + ALPHABET:
        if c not in string.ascii_letters:
            continue
        c = fold_letter(c)
        if c in seen:
            continue
        seen.append(c)
        if len(seen) == SIZE * SIZE:
            break
    return Table("".join(seen))


def locate(table: Table, c: str) -> Position:
    """Return the (row, col) of `c`. The letter must already be folded."""
    try:
        return table.position(c)
    except KeyError:
        raise TableInvariantError(f"Character {c!r} not found in table") from None
