"""An in-process placement driver that answers with fixed data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

MOCK_PD_PORT = 50021
MOCK_TIKV_PORT = 50019


@dataclass(frozen=True)
class Member:
    """A member of the placement driver cluster."""

    name: str = ""
    client_urls: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class MembersResponse:
    """The cluster members and the current leader."""

    members: List[Member]
    leader: Optional[Member]


@dataclass(frozen=True)
class Peer:
    """A replica of a region on some store."""

    id: int = 0
    store_id: int = 0


@dataclass(frozen=True)
class RegionMeta:
    """Region metadata: key span and replicas."""

    id: int = 0
    start_key: bytes = b""
    end_key: bytes = b""
    peers: List[Peer] = field(default_factory=list)


@dataclass(frozen=True)
class StoreMeta:
    """Store metadata."""

    id: int = 0
    address: str = ""


@dataclass(frozen=True)
class RegionResponse:
    """A region together with its leader."""

    region: Optional[RegionMeta]
    leader: Optional[Peer]


@dataclass(frozen=True)
class Timestamp:
    """A timestamp handed out by the oracle."""

    physical: int = 0
    logical: int = 0


@dataclass
class MockPd:
    """Placement driver stand-in used together with the mock store server."""

    ts: int = 0

    @staticmethod
    def _leader() -> Peer:
        return Peer()

    @classmethod
    def _region(cls) -> RegionMeta:
        return RegionMeta(start_key=b"", end_key=b"", peers=[cls._leader()])

    @staticmethod
    def _store() -> StoreMeta:
        return StoreMeta(address=f"localhost:{MOCK_TIKV_PORT}")

    def get_members(self) -> MembersResponse:
        """Return a single-member cluster which leads itself."""
        member = Member(name="mock tikv", client_urls=[f"localhost:{MOCK_PD_PORT}"])
        return MembersResponse(members=[member], leader=member)

    def tso(self, requests: Iterable[object]) -> Iterator[Timestamp]:
        """Answer every timestamp request with a default timestamp."""
        for _ in requests:
            yield Timestamp()

    def get_store(self, store_id: int) -> StoreMeta:
        """Return the mock store, whatever id is asked for."""
        return self._store()

    def get_region(self, key: bytes) -> RegionResponse:
        """Return the single region that covers every key."""
        return RegionResponse(region=self._region(), leader=self._leader())

    def get_region_by_id(self, region_id: int) -> RegionResponse:
        """Return the single region, whatever id is asked for."""
        return RegionResponse(region=self._region(), leader=self._leader())