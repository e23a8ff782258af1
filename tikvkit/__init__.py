"""Keys, key ranges, memcomparable encoding, backoff, configuration and a mock placement driver."""

__version__ = "0.1.0"