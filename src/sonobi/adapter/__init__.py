"""Sonobi request building and response mapping."""

from .media_type import classify_impression, index_impressions, media_type_for_imp
from .params import SonobiParams, decode_bidder_extension, parse_imp_params
from .request_builder import REQUEST_HEADERS, RequestBuilder
from .response_mapper import ResponseMapper
from .sonobi import BIDDER_CODE, SonobiAdapter

__all__ = [
    "BIDDER_CODE",
    "REQUEST_HEADERS",
    "RequestBuilder",
    "ResponseMapper",
    "SonobiAdapter",
    "SonobiParams",
    "classify_impression",
    "decode_bidder_extension",
    "index_impressions",
    "media_type_for_imp",
    "parse_imp_params",
]
