"""Client configuration: TLS file locations and request timeout."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Optional, Union

DEFAULT_REQUEST_TIMEOUT = timedelta(seconds=2)

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class Config:
    """Configuration for a raw or transactional client.

    Without security paths the connection is not protected by TLS.
    """

    ca_path: Optional[Path] = None
    cert_path: Optional[Path] = None
    key_path: Optional[Path] = None
    timeout: timedelta = DEFAULT_REQUEST_TIMEOUT

    def with_security(
        self, ca_path: PathLike, cert_path: PathLike, key_path: PathLike
    ) -> "Config":
        """Return a copy using the given CA, certificate and key files."""
        return dataclasses.replace(
            self,
            ca_path=Path(ca_path),
            cert_path=Path(cert_path),
            key_path=Path(key_path),
        )

    def with_timeout(self, timeout: timedelta) -> "Config":
        """Return a copy using the given request timeout."""
        return dataclasses.replace(self, timeout=timeout)