import pytest

from playfair import (
    CipherMode,
    PlayfairCipher,
    build_table,
    cipher,
    decrypt,
    encrypt,
    normalize,
)
from playfair.engine import digraphs


@pytest.fixture
def table():
    return build_table("KEYWORD")


# Normalizer

def test_normalize_balloon_splits_repeated_letters():
    assert "".join(normalize("BALLOON")) == "BALXLOON"
    assert digraphs("BALLOON") == [("B", "A"), ("L", "X"), ("L", "O"), ("O", "N")]


def test_normalize_pads_odd_length():
    assert "".join(normalize("HELLO")) == "HELXLO"
    assert "".join(normalize("ABC")) == "ABCX"


def test_normalize_filters_and_uppercases():
    assert "".join(normalize("Hi, there 42!")) == "HITHEREX"


def test_normalize_folds_j():
    assert "".join(normalize("jump")) == "IUMP"


def test_normalize_only_checks_within_pairs():
    # "AB BA" pairs as AB BA; the adjacent Bs straddle a pair boundary.
    assert "".join(normalize("ABBA")) == "ABBA"
    assert "".join(normalize("AAA")) == "AXAXAX"


def test_normalize_empty():
    assert normalize("") == []
    assert normalize("123 !?") == []


# Cipher vectors

def test_encrypt_hello(table):
    assert cipher("HELLO", table, CipherMode.ENCRYPT) == "GYIZSC"


def test_decrypt_keeps_filler(table):
    assert cipher("GYIZSC", table, CipherMode.DECRYPT) == "HELXLO"


def test_encrypt_balloon(table):
    assert encrypt("BALLOON", table) == "CBIZSCES"


def test_encrypt_test_differs_everywhere(table):
    result = encrypt("TEST", table)
    assert len(result) % 2 == 0
    assert len(result) == 4
    assert all(a != b for a, b in zip(result, "TEST"))


def test_lowercase_and_punctuation_match_clean_input(table):
    assert encrypt("hello, world!", table) == encrypt("HELLOWORLD", table)


def test_same_row_wraps(table):
    # O and K share row 0; O is in the last column.
    assert encrypt("OK", table) == "KE"
    assert decrypt("KE", table) == "OK"


def test_same_column_wraps(table):
    # Z and O share column 4; Z is in the last row.
    assert encrypt("ZO", table) == "OC"
    assert decrypt("OC", table) == "ZO"


def test_rectangle_is_its_own_inverse(table):
    assert encrypt("HE", table) == "GY"
    assert decrypt("HE", table) == "GY"


def test_empty_text(table):
    assert encrypt("", table) == ""


# Properties

@pytest.mark.parametrize("text", [
    "HIDETHEGOLDINTHETREESTUMP", "MEETMEATNOON", "ABCDEFGHIKLMNOPQRSTUVWXYZ", "XYZ",
])
@pytest.mark.parametrize("key", ["KEYWORD", "PLAYFAIR EXAMPLE", "", "monarchy"])
def test_round_trip_returns_normalized_text(text, key):
    table = build_table(key)
    encrypted = encrypt(text, table)
    assert len(encrypted) == len(normalize(text))
    assert len(encrypted) % 2 == 0
    assert decrypt(encrypted, table) == "".join(normalize(text))


def test_encrypting_twice_is_not_identity(table):
    text = "HIDETHEGOLD"
    assert encrypt(encrypt(text, table), table) != "".join(normalize(text))


def test_playfair_cipher_object():
    pf = PlayfairCipher("KEYWORD")
    assert pf.table == build_table("KEYWORD")
    assert pf.encode("HELLO") == "GYIZSC"
    assert pf.decode("GYIZSC") == "HELXLO"
    assert pf.run("BALLOON", CipherMode.ENCRYPT) == "CBIZSCES"


def test_repeated_filler_pairs_with_itself(table):
    # X is its own filler, so "XX" becomes two (X, X) pairs on the same row.
    assert "".join(normalize("XX")) == "XXXX"
    assert encrypt("XX", table) == "ZZZZ"
