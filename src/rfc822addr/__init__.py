"""RFC822 address field parsing."""

from __future__ import annotations

__version__ = "0.1.0"

from rfc822addr.address import (  # noqa: E402
    ParseOutcome,
    canonical_addresses,
    parse_addresses,
)
from rfc822addr.errors import AddressParseError  # noqa: E402
from rfc822addr.quoting import quote, unquote  # noqa: E402

__all__ = [
    "AddressParseError",
    "ParseOutcome",
    "__version__",
    "canonical_addresses",
    "parse_addresses",
    "quote",
    "unquote",
]
