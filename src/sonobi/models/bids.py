"""Adapter input/output values: outbound requests, raw responses, typed bids."""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..errors import AdapterError
from .openrtb import Bid


class MediaType(str, Enum):
    """Media types a Sonobi bid can be classified as."""

    BANNER = "banner"
    VIDEO = "video"


@dataclass
class RequestData:
    """
    One HTTP call to the exchange, ready for the transport.

    Attributes:
        uri: Exchange endpoint
        body: JSON-encoded single-impression bid request
        headers: HTTP headers to send
        method: HTTP method (always POST)
        imp_id: ID of the impression carried in the body
    """

    uri: str
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)
    method: str = "POST"
    imp_id: Optional[str] = None

    def json(self) -> dict[str, Any]:
        """Decode the request body."""
        return json.loads(self.body)


@dataclass
class ResponseData:
    """Status and body of an exchange reply, as handed over by the transport."""

    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class TypedBid:
    """A raw bid paired with its inferred media type."""

    bid: Bid
    bid_type: MediaType = MediaType.BANNER


@dataclass
class BidSet:
    """
    Bids recovered from one exchange response.

    Bid order follows the exchange's seat/bid enumeration. ``errors``
    holds the non-fatal per-bid problems found while mapping.
    """

    bids: list[TypedBid] = field(default_factory=list)
    errors: list[AdapterError] = field(default_factory=list)
    currency: str = "USD"

    @property
    def imp_ids(self) -> list[str]:
        """Impression IDs of the mapped bids, in order."""
        return [typed.bid.impid for typed in self.bids]
