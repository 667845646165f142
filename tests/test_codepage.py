import pytest
from hypothesis import given, strategies as st

from fig.codepage import (
    CODEPAGE,
    CODEPAGE_SYMBOLS,
    COMPRESSIBLE_CHARS,
    COMPRESSION_ALPHABET,
)
from fig.errors import InvalidByte, InvalidSymbol


def test_codepage_layout():
    assert len(CODEPAGE) == 96
    assert CODEPAGE_SYMBOLS[0] == "\n"
    assert CODEPAGE_SYMBOLS[1] == " "
    assert CODEPAGE_SYMBOLS[2:] == "".join(chr(c) for c in range(ord("!"), ord("~") + 1))


def test_compression_alphabet_drops_newline_and_quote():
    assert len(COMPRESSION_ALPHABET) == 94
    assert "\n" not in COMPRESSION_ALPHABET
    assert '"' not in COMPRESSION_ALPHABET
    assert set(COMPRESSION_ALPHABET) < set(CODEPAGE_SYMBOLS)


def test_compressible_chars_exclude_upper_case():
    assert not any(ch.isupper() for ch in COMPRESSIBLE_CHARS)
    assert COMPRESSIBLE_CHARS == set(CODEPAGE_SYMBOLS) - set("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


@pytest.mark.parametrize(
    "data, text",
    [
        (b"", ""),
        (bytes([0, 1, 2]), "\n !"),
        (bytes([17, 18, 12]), "01+"),
        (bytes([95]), "~"),
    ],
)
def test_decode(data, text):
    assert CODEPAGE.decode(data) == text


@pytest.mark.parametrize("data, offset, value", [(bytes([96]), 0, 96), (bytes([2, 3, 200]), 2, 200)])
def test_decode_rejects_bytes_outside_codepage(data, offset, value):
    with pytest.raises(InvalidByte) as excinfo:
        CODEPAGE.decode(data)
    assert excinfo.value.offset == offset
    assert excinfo.value.value == value
    assert excinfo.value.stage == "codepage"


@pytest.mark.parametrize("text, offset", [("ab\tc", 2), ("é", 0), ("1 2\r", 3)])
def test_encode_rejects_characters_outside_codepage(text, offset):
    with pytest.raises(InvalidSymbol) as excinfo:
        CODEPAGE.encode(text)
    assert excinfo.value.offset == offset


def test_validate_returns_text():
    assert CODEPAGE.validate("1 2+") == "1 2+"
    with pytest.raises(InvalidSymbol):
        CODEPAGE.validate("\t")


@given(st.lists(st.integers(min_value=0, max_value=95)).map(bytes))
def test_decode_encode_round_trip(data):
    assert CODEPAGE.encode(CODEPAGE.decode(data)) == data


@given(st.text(alphabet=CODEPAGE_SYMBOLS))
def test_encode_decode_round_trip(text):
    assert CODEPAGE.decode(CODEPAGE.encode(text)) == text
