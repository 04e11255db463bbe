"""Sonobi adapter models and data types."""

from .bids import BidSet, MediaType, RequestData, ResponseData, TypedBid
from .openrtb import Bid, BidRequest, BidResponse, Imp, SeatBid

__all__ = [
    "Bid",
    "BidRequest",
    "BidResponse",
    "BidSet",
    "Imp",
    "MediaType",
    "RequestData",
    "ResponseData",
    "SeatBid",
    "TypedBid",
]
