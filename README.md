# tikvkit

Building blocks for a client of a TiKV-style distributed key-value store:
byte-string keys and key/value pairs, key ranges and how they become scan
keys, the memcomparable key encoding, retry backoff policies, client
configuration, shared command-line options, and a placement driver
stand-in that answers with fixed data.

The package uses the standard library only.

## Modules

| Module | Contents |
| --- | --- |
| `tikvkit.backoff` | `Backoff` and `BackoffKind`: retry delays with no jitter, full jitter, equal jitter or decorrelated jitter; the presets `DEFAULT_REGION_BACKOFF`, `OPTIMISTIC_BACKOFF` and `PESSIMISTIC_BACKOFF`. |
| `tikvkit.config` | `Config`: CA, certificate and key paths and a request timeout (two seconds by default). |
| `tikvkit.codec` | `encode_bytes`, `decode_bytes`, `max_encoded_bytes_size`, and `CodecError` for malformed input. |
| `tikvkit.key` | `Key`, `KvPair`, the `Value` alias for `bytes`, and `hex_repr`. |
| `tikvkit.bound_range` | `Bound`, `BoundKind`, `BoundRange` and `KeyRange`. |
| `tikvkit.cli` | `parse_args` and `CommandArgs` for the `--pd`, `--ca`, `--cert` and `--key` options. |
| `tikvkit.mock_pd` | `MockPd` and the plain data classes it returns (`Member`, `MembersResponse`, `Peer`, `RegionMeta`, `StoreMeta`, `RegionResponse`, `Timestamp`). |

## Examples

### Retry delays

```python
from tikvkit.backoff import Backoff

backoff = Backoff.no_jitter_backoff(2, 7, 3)
backoff.next_delay_duration()  # timedelta of 2 ms
backoff.next_delay_duration()  # 4 ms
backoff.next_delay_duration()  # 7 ms, capped by max_delay_ms
backoff.next_delay_duration()  # None: attempts exhausted
```

`Backoff.full_jitter_backoff`, `Backoff.equal_jitter_backoff` and
`Backoff.decorrelated_jitter_backoff` raise `ValueError` for delays they
cannot work with. `Backoff.no_backoff()` never waits, and its `is_none()`
is true.

### Memcomparable encoding

```python
from tikvkit.codec import decode_bytes, encode_bytes

encoded = encode_bytes(b"\x01\x02\x03", False)
assert encoded == bytes([1, 2, 3, 0, 0, 0, 0, 0, 250])
assert decode_bytes(encoded, False) == b"\x01\x02\x03"
```

Bytes are written in groups of eight, each followed by a marker byte that
records the padding, so encodings sort in the same order as the original
bytes. Pass `True` for descending order. Malformed input raises
`CodecError`.

### Keys and pairs

```python
from tikvkit.key import Key, KvPair

key = Key("TiKV")
repr(key)                 # 'Key(54694B56)'
key.to_encoded()          # the memcomparable form
KvPair("k1", "v1").value  # b'v1'
```

A `Key` is built from bytes, a string (UTF-8), an iterable of byte values
or another key, and keys compare by their bytes.

### Ranges

```python
from tikvkit.bound_range import BoundRange
from tikvkit.key import Key

start, end = BoundRange.inclusive("a", "z").into_keys()
assert start == Key("a") and end == Key(b"z\x00")

start, end = BoundRange.range_from("a").into_keys()
assert end is None
```

Ranges are built with `BoundRange.range`, `inclusive`, `range_from`,
`range_to`, `range_to_inclusive`, `full`, `from_keys`, `from_bounds` and
`from_key_range`. `into_keys()` gives the scan start key and the optional
end key: an excluded start or an included end gains a trailing zero byte.
`to_key_range()` gives the `KeyRange` form, where an open end is the empty
key.

### Configuration and command-line options

```python
from tikvkit.cli import parse_args
from tikvkit.config import Config

config = Config().with_security("root.ca", "internal.cert", "internal.key")

args = parse_args("txn", ["--pd", "10.0.0.1:2379,10.0.0.2:2379"])
assert args.pd == ["10.0.0.1:2379", "10.0.0.2:2379"]
config = args.to_config()
```

Without `--pd` the endpoint is `localhost:2379`. `--ca` needs `--cert`,
`--cert` needs `--key` and `--key` needs `--ca`; a missing partner ends
the parse with a usage error. `to_config()` sets the security paths only
when all three are given.

### Placement driver stand-in

```python
from tikvkit.mock_pd import MockPd

pd = MockPd()
pd.get_members().leader.name       # 'mock tikv'
pd.get_store(1).address            # 'localhost:50019'
pd.get_region(b"any").region.peers # one default peer
```

`MockPd` answers every region lookup with one region covering all keys,
and `tso` yields a default `Timestamp` for every request it is given.

## What this package does not do

It does not connect to a cluster. There is no client that routes keys or
ranges to regions and stores, no retrying placement driver client, no
in-memory key-value store, and no network server: `MockPd` is an ordinary
object whose methods return fixed data. The package installs no commands;
`parse_args` is a function for programs to call.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.