"""Command-line options shared by the example programs."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .config import Config

DEFAULT_PD_ENDPOINT = "localhost:2379"


@dataclass
class CommandArgs:
    """Placement driver endpoints and optional TLS file locations."""

    pd: List[str] = field(default_factory=lambda: [DEFAULT_PD_ENDPOINT])
    ca: Optional[Path] = None
    cert: Optional[Path] = None
    key: Optional[Path] = None

    def to_config(self) -> Config:
        """Build a configuration, with security only if all three files are set."""
        if self.ca is not None and self.cert is not None and self.key is not None:
            return Config().with_security(self.ca, self.cert, self.key)
        return Config()


def _build_parser(app_name: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=app_name, allow_abbrev=False)
    parser.add_argument(
        "--pd",
        "--pd-endpoint",
        "--pd-endpoints",
        dest="pd",
        metavar="PD_URL",
        nargs="+",
        action="extend",
        default=None,
        help="Sets PD endpoints. Uses `,` to separate multiple PDs",
    )
    parser.add_argument(
        "--ca",
        metavar="CA_PATH",
        help="Sets the CA. Must be used with --cert and --key",
    )
    parser.add_argument(
        "--cert",
        metavar="CERT_PATH",
        help="Sets the certificate. Must be used with --ca and --key",
    )
    parser.add_argument(
        "--key",
        "--private-key",
        dest="key",
        metavar="KEY_PATH",
        help="Sets the private key. Must be used with --ca and --cert",
    )
    return parser


def parse_args(app_name: str, argv: Optional[Sequence[str]] = None) -> CommandArgs:
    """Parse the command line; exits with a usage error on invalid input."""
    parser = _build_parser(app_name)
    ns = parser.parse_args(argv)

    # ca requires cert, cert requires key, key requires ca.
    for option, required in (("ca", "cert"), ("cert", "key"), ("key", "ca")):
        if getattr(ns, option) is not None and getattr(ns, required) is None:
            parser.error(f"--{option} requires --{required}")

    raw = ns.pd if ns.pd is not None else [DEFAULT_PD_ENDPOINT]
    endpoints = [part for value in raw for part in value.split(",")]

    return CommandArgs(
        pd=endpoints,
        ca=Path(ns.ca) if ns.ca is not None else None,
        cert=Path(ns.cert) if ns.cert is not None else None,
        key=Path(ns.key) if ns.key is not None else None,
    )