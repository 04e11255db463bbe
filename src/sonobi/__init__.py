"""
Sonobi exchange adapter.

Reshapes a canonical OpenRTB bid request into single-impression Sonobi
requests and maps Sonobi responses back into typed bids.
"""

from .adapter import RequestBuilder, ResponseMapper, SonobiAdapter, SonobiParams
from .config import AdapterConfig
from .errors import (
    AdapterError,
    BadInputError,
    BadServerResponseError,
    ConfigurationError,
    MalformedExtensionError,
    SerializationError,
)
from .models import (
    Bid,
    BidRequest,
    BidResponse,
    BidSet,
    Imp,
    MediaType,
    RequestData,
    ResponseData,
    TypedBid,
)

__version__ = '1.0.0'

__all__ = [
    'SonobiAdapter',
    'RequestBuilder',
    'ResponseMapper',
    'SonobiParams',
    'AdapterConfig',
    'AdapterError',
    'MalformedExtensionError',
    'SerializationError',
    'BadInputError',
    'BadServerResponseError',
    'ConfigurationError',
    'Bid',
    'BidRequest',
    'BidResponse',
    'BidSet',
    'Imp',
    'MediaType',
    'RequestData',
    'ResponseData',
    'TypedBid',
]
