"""Domain canonicalizers applied to the final domain of each addr-spec."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rfc822addr.config import AddrConfig

Canonicalizer = Callable[[str], str]


def identity(domain: str) -> str:
    return domain


@dataclass(frozen=True)
class DefaultHost:
    """Substitute a configured host when an address carries no domain."""

    host: str

    def __call__(self, domain: str) -> str:
        return domain or self.host


def canonicalizer_from_config(config: AddrConfig) -> Canonicalizer:
    """Build the canonicalizer described by ``[canonicalize]``."""
    if config.canonicalize.default_host:
        return DefaultHost(config.canonicalize.default_host)
    return identity
