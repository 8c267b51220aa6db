import string

import pytest

from ohmimetro.font import FONT, GLYPH_SIZE, glyph, glyph_index


def test_zero_glyph_matches_table():
    assert glyph("0") == bytes((0x3e, 0x41, 0x41, 0x49, 0x41, 0x41, 0x3e, 0x00))


def test_upper_i_glyph_matches_table():
    assert glyph("I") == bytes((0x00, 0x00, 0x00, 0x7f, 0x00, 0x00, 0x00, 0x00))


def test_lower_z_is_last_glyph():
    assert glyph("z") == FONT[-GLYPH_SIZE:]


@pytest.mark.parametrize("c", [" ", "!", ".", "\u03a9", "\n"])
def test_unknown_characters_are_blank(c):
    assert glyph_index(c) == 0
    assert glyph(c) == bytes(GLYPH_SIZE)


@pytest.mark.parametrize("c", string.ascii_letters + string.digits)
def test_every_supported_glyph_is_eight_bytes_and_not_blank(c):
    g = glyph(c)
    assert len(g) == GLYPH_SIZE
    assert any(g)


def test_glyph_offsets_are_distinct_and_aligned():
    offsets = [glyph_index(c) for c in string.ascii_letters + string.digits]
    assert len(set(offsets)) == len(offsets)
    assert all(offset % GLYPH_SIZE == 0 for offset in offsets)
    assert max(offsets) + GLYPH_SIZE == len(FONT)


def test_digits_precede_uppercase_precede_lowercase():
    assert glyph_index("9") < glyph_index("A") < glyph_index("Z") < glyph_index("a")


@pytest.mark.parametrize("bad", ["", "AB"])
def test_requires_single_character(bad):
    with pytest.raises(ValueError):
        glyph_index(bad)