import pytest

from models.errors import DecodeError
from services.codec import MAX_UINT256, decode, encode, to_int


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0x0de0b6b3a7640000", "1000000000000000000"),
        ("0X1F4", "500"),
        ("fa", "250"),
        ("+0xff", "255"),
        ("0x" + "00" * 31 + "2a", "42"),
        ("0x0", "0"),
        (0, "0"),
        (12345, "12345"),
        (b"\x01\x00", "256"),
    ],
)
def test_decode_valid(raw, expected):
    assert decode(raw) == expected


def test_decode_max_uint256_is_exact():
    assert decode(hex(MAX_UINT256)) == str(MAX_UINT256)
    assert decode("0x" + "ff" * 32) == str(MAX_UINT256)


@pytest.mark.parametrize(
    "raw",
    ["", "0x", "-0x1", "-1", "0xZZ", "0x1_0", " 0x10", "0x10\n", "12.5", -1, True, None, 1.5, b""],
)
def test_decode_rejects_malformed(raw):
    with pytest.raises(DecodeError):
        decode(raw)


def test_decode_rejects_values_over_256_bits():
    with pytest.raises(DecodeError):
        decode(hex(MAX_UINT256 + 1))

    with pytest.raises(DecodeError):
        to_int(b"\x01" + b"\x00" * 32)


@pytest.mark.parametrize("value", [0, 1, 9, 10, 500, 10**18, 2**128 + 7, MAX_UINT256])
def test_encode_decode_round_trip(value):
    assert encode(decode(hex(value))) == hex(value)


def test_encode_ignores_leading_zeros():
    assert encode("000250") == "0xfa"


@pytest.mark.parametrize("value", ["", "-5", "0x10", "1e3", " 1", str(MAX_UINT256 + 1), "9" * 5000])
def test_encode_rejects_malformed(value):
    with pytest.raises(DecodeError):
        encode(value)
