"""
Request Builder for the Sonobi adapter.

Splits a canonical OpenRTB bid request into one exchange request per
impression, since the Sonobi endpoint only accepts a single impression
per call. The impression's TagID from ``imp.ext.bidder`` is copied into
``imp.tagid``.
"""

from dataclasses import replace

from ..errors import AdapterError, MalformedExtensionError, SerializationError
from ..logging import adapter_logger
from ..models.bids import RequestData
from ..models.openrtb import BidRequest, Imp
from .params import parse_imp_params

REQUEST_HEADERS: dict[str, str] = {
    "Content-Type": "application/json;charset=utf-8",
    "Accept": "application/json",
}


class RequestBuilder:
    """
    Builds Sonobi exchange requests from a canonical bid request.

    The input request is never modified; each outbound request is built
    from a copy holding a fresh impression list.
    """

    def __init__(self, endpoint: str, bidder_code: str = "sonobi"):
        """
        Initialize the builder.

        Args:
            endpoint: Exchange endpoint URI every request is posted to
            bidder_code: Bidder code used in log entries
        """
        self.endpoint = endpoint
        self.logger = adapter_logger(bidder_code)

    def build(
        self, request: BidRequest
    ) -> tuple[list[RequestData], list[AdapterError]]:
        """
        Build one exchange request per impression.

        An impression whose params cannot be decoded, or whose request
        cannot be encoded, is skipped and reported in the error list.
        The remaining impressions are still built.

        Args:
            request: Canonical bid request

        Returns:
            (outbound requests in impression order, per-impression errors)
        """
        requests: list[RequestData] = []
        errors: list[AdapterError] = []
        log = self.logger.bind(auction_id=request.id)

        for imp in request.imp:
            try:
                params = parse_imp_params(imp)
            except MalformedExtensionError as e:
                log.warning(
                    "Skipping impression with malformed ext",
                    imp_id=imp.id,
                    error=e.message,
                )
                errors.append(e)
                continue

            single = replace(request, imp=[replace(imp, tagid=params.tag_id)])

            outbound, error = self._make_request(single, imp)
            if error is not None:
                errors.append(error)
                continue
            requests.append(outbound)

        log.debug(
            "Built exchange requests",
            imp_count=len(request.imp),
            request_count=len(requests),
            error_count=len(errors),
        )
        return requests, errors

    def _make_request(
        self, request: BidRequest, imp: Imp
    ) -> tuple[RequestData | None, AdapterError | None]:
        """Encode a single-impression request into HTTP request data."""
        try:
            body = request.to_json()
        except (TypeError, ValueError) as e:
            self.logger.warning(
                "Failed to encode exchange request",
                auction_id=request.id,
                imp_id=imp.id,
                error=str(e),
            )
            return None, SerializationError(
                f'Failed to encode request for imp "{imp.id}": {e}', imp_id=imp.id
            )

        return (
            RequestData(
                uri=self.endpoint,
                body=body,
                headers=dict(REQUEST_HEADERS),
                method="POST",
                imp_id=imp.id,
            ),
            None,
        )
