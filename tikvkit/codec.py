"""Memcomparable byte encoding used for MVCC keys."""

from __future__ import annotations

ENC_GROUP_SIZE = 8
ENC_MARKER = 0xFF
_ASC_PADDING = bytes(ENC_GROUP_SIZE)
_DESC_PADDING = bytes([0xFF]) * ENC_GROUP_SIZE


class CodecError(ValueError):
    """Raised when encoded bytes cannot be decoded."""


def max_encoded_bytes_size(n: int) -> int:
    """Return the maximum size of the encoding of ``n`` bytes."""
    return (n // ENC_GROUP_SIZE + 1) * (ENC_GROUP_SIZE + 1)


def _invert(data: bytes) -> bytes:
    return bytes(b ^ 0xFF for b in data)


def encode_bytes(key: bytes, desc: bool = False) -> bytes:
    """Encode ``key`` so that byte order of encodings matches key order."""
    out = bytearray()
    length = len(key)
    for index in range(0, length + 1, ENC_GROUP_SIZE):
        group = key[index : index + ENC_GROUP_SIZE]
        pad = ENC_GROUP_SIZE - len(group) if length - index <= ENC_GROUP_SIZE else 0
        out += group + _ASC_PADDING[:pad]
        out.append(ENC_MARKER - pad)
    return _invert(out) if desc else bytes(out)


def decode_bytes(data: bytes, desc: bool = False) -> bytes:
    """Decode bytes produced by :func:`encode_bytes`."""
    if not data:
        return b""
    out = bytearray()
    read_offset = 0
    while True:
        marker_offset = read_offset + ENC_GROUP_SIZE
        if marker_offset >= len(data):
            raise CodecError(f"unexpected EOF, original key = {list(data)!r}")
        out += data[read_offset:marker_offset]
        read_offset += ENC_GROUP_SIZE + 1

        marker = data[marker_offset]
        pad_size = marker if desc else ENC_MARKER - marker
        if pad_size > 0:
            if pad_size > ENC_GROUP_SIZE:
                raise CodecError("invalid key padding")
            padding = _DESC_PADDING if desc else _ASC_PADDING
            if bytes(out[len(out) - pad_size :]) != padding[:pad_size]:
                raise CodecError("invalid key padding")
            del out[len(out) - pad_size :]
            return _invert(out) if desc else bytes(out)