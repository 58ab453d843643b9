import re

from models.errors import DecodeError

MAX_UINT256 = 2**256 - 1

_HEX_RE = re.compile(r"\+?(0[xX])?([0-9a-fA-F]+)")
_DEC_RE = re.compile(r"[0-9]+")


def _check_range(value: int, raw) -> int:
    if value < 0:
        raise DecodeError(f"Negative value is not a valid uint256: {raw!r}")
    if value > MAX_UINT256:
        raise DecodeError(f"Value does not fit in 256 bits: {raw!r}")
    return value


def to_int(raw: str | int | bytes) -> int:
    """Parse a chain-native unsigned integer.

    Accepts a hex string (optional ``+`` sign and ``0x`` prefix), a
    non-negative ``int`` or a big-endian ``bytes`` word.
    """
    if isinstance(raw, bool):
        raise DecodeError(f"Unsupported value type: {type(raw).__name__}")

    if isinstance(raw, int):
        return _check_range(raw, raw)

    if isinstance(raw, (bytes, bytearray)):
        if not raw:
            raise DecodeError("Empty return data")
        return _check_range(int.from_bytes(raw, "big"), raw)

    if isinstance(raw, str):
        match = _HEX_RE.fullmatch(raw)
        if not match:
            raise DecodeError(f"Malformed hex integer: {raw!r}")
        return _check_range(int(match.group(2), 16), raw)

    raise DecodeError(f"Unsupported value type: {type(raw).__name__}")


def decode(raw: str | int | bytes) -> str:
    """Return the exact base-10 string of a raw uint256 value."""
    return str(to_int(raw))


def encode(value: str) -> str:
    if not isinstance(value, str) or not _DEC_RE.fullmatch(value):
        raise DecodeError(f"Malformed decimal string: {value!r}")
    if len(value.lstrip("0")) > len(str(MAX_UINT256)):
        raise DecodeError(f"Value does not fit in 256 bits: {value!r}")

    return hex(_check_range(int(value), value))
