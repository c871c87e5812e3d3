import pytest

from fsndn.hashing import bkdr_hash


def test_empty_string_hashes_to_zero():
    assert bkdr_hash("") == 0


def test_single_character_is_its_code():
    assert bkdr_hash("a") == ord("a")


def test_str_and_bytes_agree():
    assert bkdr_hash("/a/b/c/USTC.jpg") == bkdr_hash(b"/a/b/c/USTC.jpg")


def test_hash_stops_at_nul():
    assert bkdr_hash(b"abc\x00def") == bkdr_hash(b"abc")


@pytest.mark.parametrize(
    "text",
    ["hadoop-master", "/ndn/fsndn/prefix", "x" * 500, "名前", b"\xff\xfe\x80"],
)
def test_result_fits_in_31_bits(text):
    value = bkdr_hash(text)
    assert 0 <= value <= 0x7FFFFFFF


def test_two_character_value_is_pinned():
    assert bkdr_hash("ab") == 12805


def test_order_matters():
    assert bkdr_hash("ab") != bkdr_hash("ba")


def test_signed_high_bytes_differ_from_unsigned_reading():
    # 0xFF read as a signed char is -1, so it hashes like a prefix minus one.
    assert bkdr_hash(b"a\xff") == (bkdr_hash(b"a") * 131 - 1) & 0x7FFFFFFF