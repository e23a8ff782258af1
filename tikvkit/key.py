"""Keys, values and key/value pairs."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Iterable, Iterator, Tuple, Union

from .codec import encode_bytes

Value = bytes
"""The value part of a key/value pair: any sequence of bytes."""

KeyLike = Union["Key", bytes, bytearray, memoryview, str, Iterable[int]]
ValueLike = Union[bytes, bytearray, memoryview, str, Iterable[int]]


def hex_repr(data: bytes) -> str:
    """Render bytes as upper-case hexadecimal, two digits per byte."""
    return bytes(data).hex().upper()


def _to_bytes(data: ValueLike) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


@dataclass(frozen=True, order=True)
class Key:
    """The key part of a key/value pair: an ordered sequence of bytes.

    A key may be built from bytes, a string (encoded as UTF-8), an iterable
    of byte values or another key.
    """

    data: bytes = field(default=b"")

    EMPTY: ClassVar["Key"]

    def __post_init__(self) -> None:
        raw = self.data
        if isinstance(raw, Key):
            raw = raw.data
        object.__setattr__(self, "data", _to_bytes(raw))

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"Key({hex_repr(self.data)})"

    def is_empty(self) -> bool:
        """Return whether the key is empty."""
        return not self.data

    def zero_terminated(self) -> bool:
        """Return whether the last byte of the key is zero."""
        return self.data.endswith(b"\x00")

    def with_zero(self) -> "Key":
        """Return the smallest key greater than this one: this key plus a zero byte."""
        return Key(self.data + b"\x00")

    def into_lower_bound(self) -> Tuple["Key", bool]:
        """Treat the key as an inclusive lower bound.

        Returns ``(key, included)``. A trailing zero byte is stripped and makes
        the bound exclusive.
        """
        if self.zero_terminated():
            return Key(self.data[:-1]), False
        return self, True

    def into_upper_bound(self) -> Tuple["Key", bool]:
        """Treat the key as an exclusive upper bound.

        Returns ``(key, included)``. A trailing zero byte is stripped and makes
        the bound inclusive.
        """
        if self.zero_terminated():
            return Key(self.data[:-1]), True
        return self, False

    def to_encoded(self) -> "Key":
        """Return the MVCC-encoded form of the key."""
        return Key(encode_bytes(self.data, False))


Key.EMPTY = Key(b"")


@dataclass(frozen=True)
class KvPair:
    """A key/value pair."""

    key: Key
    value: Value

    def __post_init__(self) -> None:
        key = self.key if isinstance(self.key, Key) else Key(self.key)
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "value", _to_bytes(self.value))

    def __iter__(self) -> Iterator[Union[Key, Value]]:
        yield self.key
        yield self.value

    def __repr__(self) -> str:
        try:
            text = self.value.decode("utf-8")
        except UnicodeDecodeError:
            return f"KvPair({hex_repr(self.key.data)}, {hex_repr(self.value)})"
        escaped = text.replace("\\", "\\\\").replace('"', '\\"')
        return f'KvPair({hex_repr(self.key.data)}, "{escaped}")'

    def with_key(self, key: KeyLike) -> "KvPair":
        """Return a copy with the key replaced."""
        return replace(self, key=key if isinstance(key, Key) else Key(key))

    def with_value(self, value: ValueLike) -> "KvPair":
        """Return a copy with the value replaced."""
        return replace(self, value=_to_bytes(value))