"""
Sonobi bidder adapter.

Entry point used by the orchestrator: ``make_requests`` before the
exchange calls and ``make_bids`` for each response. The transport that
executes the requests belongs to the caller.
"""

from typing import Optional

from ..config import AdapterConfig
from ..errors import AdapterError
from ..models.bids import BidSet, RequestData, ResponseData
from ..models.openrtb import BidRequest
from .request_builder import RequestBuilder
from .response_mapper import ResponseMapper

BIDDER_CODE = "sonobi"


class SonobiAdapter:
    """Translates canonical bid requests to and from the Sonobi exchange."""

    def __init__(self, endpoint: str):
        """
        Initialize the adapter.

        Args:
            endpoint: Sonobi exchange URI
        """
        self.endpoint = endpoint
        self.request_builder = RequestBuilder(endpoint, bidder_code=BIDDER_CODE)
        self.response_mapper = ResponseMapper(bidder_code=BIDDER_CODE)

    @classmethod
    def from_config(cls, config: Optional[AdapterConfig] = None) -> "SonobiAdapter":
        """Create an adapter from config (environment if not provided)."""
        config = config or AdapterConfig.from_env()
        return cls(config.endpoint)

    @property
    def name(self) -> str:
        """Bidder code, also used for cookie sync bookkeeping by the host."""
        return BIDDER_CODE

    def skip_no_cookies(self) -> bool:
        """Sonobi is called even when the user has no synced cookie."""
        return False

    def make_requests(
        self, request: BidRequest
    ) -> tuple[list[RequestData], list[AdapterError]]:
        """Build one exchange request per impression."""
        return self.request_builder.build(request)

    def make_bids(
        self,
        internal_request: BidRequest,
        external_request: Optional[RequestData],
        response: ResponseData,
    ) -> tuple[BidSet | None, list[AdapterError]]:
        """
        Map an exchange response to typed bids.

        ``external_request`` is the request that produced the response;
        bids are typed against ``internal_request`` so it is not needed.
        """
        return self.response_mapper.map(internal_request, response)
