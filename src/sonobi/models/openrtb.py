"""
OpenRTB 2.x request and response objects used by the adapter.

Only the fields the adapter reads or writes are modelled. Everything
else (device, site, user, creative payload, ...) is carried through
untouched in ``extra`` so a round trip through ``from_dict``/``to_dict``
keeps the orchestrator's data intact.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Union

RawJSON = Union[dict[str, Any], str, bytes, bytearray]


def _decode_raw(value: Any) -> Any:
    """Turn a raw JSON blob into Python data; dicts pass through."""
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return json.loads(value)
    return value


@dataclass
class Imp:
    """
    One impression (ad slot) of a bid request.

    Attributes:
        id: Impression ID, unique within the request
        banner: Banner shape, None when not offered
        video: Video shape, None when not offered
        tagid: Exchange-side placement identifier
        ext: Opaque, bidder-namespaced extension ({"bidder": {...}})
        extra: Any other impression fields
    """

    id: str
    banner: Optional[dict[str, Any]] = None
    video: Optional[dict[str, Any]] = None
    tagid: str = ""
    ext: Optional[RawJSON] = None
    extra: dict[str, Any] = field(default_factory=dict)

    _FIELDS = ("id", "banner", "video", "tagid", "ext")

    def to_dict(self) -> dict[str, Any]:
        """Convert to an OpenRTB impression object."""
        result: dict[str, Any] = {"id": self.id}
        if self.banner is not None:
            result["banner"] = self.banner
        if self.video is not None:
            result["video"] = self.video
        if self.tagid:
            result["tagid"] = self.tagid
        if self.ext is not None:
            result["ext"] = _decode_raw(self.ext)
        result.update(self.extra)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Imp":
        """Create from an OpenRTB impression object."""
        return cls(
            id=data.get("id", ""),
            banner=data.get("banner"),
            video=data.get("video"),
            tagid=data.get("tagid", ""),
            ext=data.get("ext"),
            extra={k: v for k, v in data.items() if k not in cls._FIELDS},
        )


@dataclass
class BidRequest:
    """
    Canonical OpenRTB bid request.

    Attributes:
        id: Auction ID
        imp: Ordered impressions
        extra: Request-level objects (site, app, device, user, regs, ...)
    """

    id: str
    imp: list[Imp] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to an OpenRTB bid request object."""
        result: dict[str, Any] = {"id": self.id}
        result["imp"] = [imp.to_dict() for imp in self.imp]
        result.update(self.extra)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BidRequest":
        """Create from an OpenRTB bid request object."""
        return cls(
            id=data.get("id", ""),
            imp=[Imp.from_dict(imp) for imp in data.get("imp", [])],
            extra={k: v for k, v in data.items() if k not in ("id", "imp")},
        )

    def to_json(self) -> bytes:
        """
        Serialize to a compact UTF-8 JSON body.

        Raises:
            TypeError: If a value is not JSON serializable
            ValueError: If a float is NaN or infinite
        """
        body = json.dumps(self.to_dict(), separators=(",", ":"), allow_nan=False)
        return body.encode("utf-8")


def _optional_str(data: dict[str, Any], key: str) -> str:
    """Read a string field; null or absent reads as ""."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"bid.{key} must be a string, got {type(value).__name__}")
    return value


@dataclass
class Bid:
    """A single bid; the adapter only looks at impid."""

    id: str
    impid: str
    price: float = 0.0
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bid":
        """
        Create from an OpenRTB bid object.

        Null id/impid read as "" and a null price as 0.

        Raises:
            TypeError: If a field has the wrong JSON type
        """
        if not isinstance(data, dict):
            raise TypeError(f"bid must be an object, got {type(data).__name__}")
        price = data.get("price")
        if price is None:
            price = 0.0
        elif isinstance(price, bool) or not isinstance(price, (int, float)):
            raise TypeError(f"bid.price must be a number, got {type(price).__name__}")
        return cls(
            id=_optional_str(data, "id"),
            impid=_optional_str(data, "impid"),
            price=float(price),
            extra={
                k: v for k, v in data.items() if k not in ("id", "impid", "price")
            },
        )


@dataclass
class SeatBid:
    """Bids grouped under one buyer seat."""

    bid: list[Bid] = field(default_factory=list)
    seat: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SeatBid":
        """Create from an OpenRTB seatbid object."""
        if not isinstance(data, dict):
            raise TypeError(f"seatbid must be an object, got {type(data).__name__}")
        bids = data.get("bid") or []
        if not isinstance(bids, list):
            raise TypeError("seatbid.bid must be an array")
        return cls(bid=[Bid.from_dict(b) for b in bids], seat=data.get("seat", ""))


@dataclass
class BidResponse:
    """OpenRTB bid response as returned by the exchange."""

    id: str = ""
    seatbid: list[SeatBid] = field(default_factory=list)
    cur: str = "USD"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BidResponse":
        """Create from an OpenRTB bid response object."""
        if not isinstance(data, dict):
            raise TypeError(
                f"bid response must be an object, got {type(data).__name__}"
            )
        seats = data.get("seatbid") or []
        if not isinstance(seats, list):
            raise TypeError("seatbid must be an array")
        return cls(
            id=data.get("id", ""),
            seatbid=[SeatBid.from_dict(sb) for sb in seats],
            cur=data.get("cur") or "USD",
        )

    @classmethod
    def from_json(cls, body: Union[str, bytes]) -> "BidResponse":
        """Decode a JSON response body."""
        return cls.from_dict(json.loads(body))
