import pytest

from checkpointer.utf8 import (
    char_size,
    codepoint_from_utf8,
    iter_codepoints,
    utf8_from_codepoint,
)

SAMPLES = ["A", "~", "\u00e9", "\u20ac", "\ue000", "\ue0c5", "\U0001f600"]


@pytest.mark.parametrize("ch", SAMPLES)
def test_char_size_matches_encoded_length(ch):
    encoded = ch.encode("utf-8")
    assert char_size(encoded[0]) == len(encoded)


def test_char_size_rejects_out_of_range():
    with pytest.raises(ValueError):
        char_size(256)


def test_ascii_codepoint_is_its_byte():
    assert codepoint_from_utf8(b"A") == (ord("A"), 1)


def test_private_use_symbol_packs_utf8_bytes():
    value, end = codepoint_from_utf8("\ue000")
    assert value == 0xEE8080
    assert end == len("\ue000".encode("utf-8"))


@pytest.mark.parametrize("ch", SAMPLES)
def test_round_trip(ch):
    encoded = ch.encode("utf-8")
    value, end = codepoint_from_utf8(encoded)
    assert end == len(encoded)
    assert utf8_from_codepoint(value) == encoded


def test_offset_reads_following_character():
    data = "a\u20acb".encode("utf-8")
    first, nxt = codepoint_from_utf8(data, 0)
    second, after = codepoint_from_utf8(data, nxt)
    third, end = codepoint_from_utf8(data, after)
    assert utf8_from_codepoint(first) == b"a"
    assert utf8_from_codepoint(second) == "\u20ac".encode("utf-8")
    assert utf8_from_codepoint(third) == b"b"
    assert end == len(data)


def test_truncated_sequence_raises():
    data = "\u20ac".encode("utf-8")[:2]
    with pytest.raises(ValueError):
        codepoint_from_utf8(data)


def test_offset_out_of_range_raises():
    with pytest.raises(IndexError):
        codepoint_from_utf8(b"ab", 2)


def test_zero_codepoint_keeps_one_byte():
    assert utf8_from_codepoint(0) == b"\0"


def test_utf8_from_codepoint_rejects_large_values():
    with pytest.raises(ValueError):
        utf8_from_codepoint(1 << 32)


def test_iter_codepoints_reassembles_text():
    text = "Backup \ue004 caf\u00e9 \U0001f600"
    joined = b"".join(utf8_from_codepoint(cp) for cp in iter_codepoints(text))
    assert joined.decode("utf-8") == text


def test_iter_codepoints_counts_characters():
    text = "\ue000\ue001\ue002xyz"
    assert len(list(iter_codepoints(text))) == len(text)


def test_iter_codepoints_empty():
    assert list(iter_codepoints(b"")) == []