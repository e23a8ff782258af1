"""Key ranges with inclusive, exclusive or open bounds."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from .key import Key, KeyLike


class BoundKind(enum.Enum):
    """How a bound treats its key."""

    INCLUDED = "included"
    EXCLUDED = "excluded"
    UNBOUNDED = "unbounded"


@dataclass(frozen=True)
class Bound:
    """One end of a range: a key that is included or excluded, or no limit."""

    kind: BoundKind
    key: Optional[Key] = None

    def __post_init__(self) -> None:
        if self.kind is BoundKind.UNBOUNDED:
            if self.key is not None:
                raise ValueError("an unbounded bound carries no key")
            return
        if self.key is None:
            raise ValueError(f"a {self.kind.value} bound needs a key")
        object.__setattr__(self, "key", Key(self.key))

    @classmethod
    def included(cls, key: KeyLike) -> "Bound":
        """A bound that includes ``key``."""
        return cls(BoundKind.INCLUDED, Key(key))

    @classmethod
    def excluded(cls, key: KeyLike) -> "Bound":
        """A bound that excludes ``key``."""
        return cls(BoundKind.EXCLUDED, Key(key))

    @classmethod
    def unbounded(cls) -> "Bound":
        """A bound without a limit."""
        return cls(BoundKind.UNBOUNDED)


def _bound_from_pair(pair: Tuple[Key, bool]) -> Bound:
    key, included = pair
    return Bound.included(key) if included else Bound.excluded(key)


@dataclass(frozen=True)
class KeyRange:
    """A range on the wire: start inclusive, end exclusive, empty end meaning open."""

    start_key: bytes = b""
    end_key: bytes = b""


@dataclass(frozen=True, eq=False)
class BoundRange:
    """A range of keys.

    The empty key is the smallest key, so an open lower bound means the empty
    key. An empty key used as an upper bound means the range is open above.
    """

    start: Bound
    end: Bound

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundRange):
            return self.start == other.start and self.end == other.end
        if isinstance(other, tuple) and len(other) == 2:
            return self.start == other[0] and self.end == other[1]
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.start, self.end))

    @classmethod
    def range(cls, start: KeyLike, end: KeyLike) -> "BoundRange":
        """Keys from ``start`` inclusive to ``end`` exclusive."""
        return cls(Bound.included(start), Bound.excluded(end))

    @classmethod
    def inclusive(cls, start: KeyLike, end: KeyLike) -> "BoundRange":
        """Keys from ``start`` to ``end``, both inclusive."""
        return cls(Bound.included(start), Bound.included(end))

    @classmethod
    def range_from(cls, start: KeyLike) -> "BoundRange":
        """Keys from ``start`` inclusive, open above."""
        return cls(Bound.included(start), Bound.unbounded())

    @classmethod
    def range_to(cls, end: KeyLike) -> "BoundRange":
        """Keys below ``end``, exclusive."""
        return cls(Bound.unbounded(), Bound.excluded(end))

    @classmethod
    def range_to_inclusive(cls, end: KeyLike) -> "BoundRange":
        """Keys up to and including ``end``."""
        return cls(Bound.unbounded(), Bound.included(end))

    @classmethod
    def full(cls) -> "BoundRange":
        """Every key."""
        return cls(Bound.unbounded(), Bound.unbounded())

    @classmethod
    def from_keys(cls, start: KeyLike, end: Optional[KeyLike]) -> "BoundRange":
        """Build a range from scan-style keys.

        ``start`` is inclusive unless it ends in a zero byte; ``end`` is
        exclusive unless it ends in a zero byte; a missing ``end`` is open.
        """
        lower = _bound_from_pair(Key(start).into_lower_bound())
        upper = (
            Bound.unbounded()
            if end is None
            else _bound_from_pair(Key(end).into_upper_bound())
        )
        return cls(lower, upper)

    @classmethod
    def from_bounds(cls, start: Bound, end: Bound) -> "BoundRange":
        """Build a range from two explicit bounds."""
        return cls(start, end)

    @classmethod
    def from_key_range(cls, key_range: KeyRange) -> "BoundRange":
        """Build a range from its wire form."""
        lower = _bound_from_pair(Key(key_range.start_key).into_lower_bound())
        upper = _bound_from_pair(Key(key_range.end_key).into_upper_bound())
        return cls(lower, upper)

    def into_keys(self) -> Tuple[Key, Optional[Key]]:
        """Return the scan keys: start inclusive, end exclusive or None when open.

        An excluded start or included end is expressed by appending a zero byte.
        """
        kind = self.start.kind
        if kind is BoundKind.INCLUDED:
            start = self.start.key
        elif kind is BoundKind.EXCLUDED:
            start = self.start.key.with_zero()
        else:
            start = Key.EMPTY

        kind = self.end.kind
        if kind is BoundKind.INCLUDED:
            end: Optional[Key] = self.end.key.with_zero()
        elif kind is BoundKind.EXCLUDED:
            end = self.end.key
        else:
            end = None
        return start, end

    def start_bound(self) -> Bound:
        """The lower bound."""
        return self.start

    def end_bound(self) -> Bound:
        """The upper bound, with an empty key reported as unbounded."""
        if self.end.kind is not BoundKind.UNBOUNDED and self.end.key.is_empty():
            return Bound.unbounded()
        return self.end

    def to_key_range(self) -> KeyRange:
        """Return the wire form of the range."""
        start, end = self.into_keys()
        return KeyRange(start_key=start.data, end_key=end.data if end is not None else b"")