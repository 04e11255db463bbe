"""
Response Mapper for the Sonobi adapter.

Turns an exchange HTTP response into typed bids. Status handling is
terminal; there are no retries here.

    204            -> no bid, no error
    400            -> BadInputError
    other != 200   -> BadServerResponseError
    200            -> decode body and type each bid
"""

from http import HTTPStatus

from ..errors import AdapterError, BadInputError, BadServerResponseError
from ..logging import adapter_logger
from ..models.bids import BidSet, ResponseData, TypedBid
from ..models.openrtb import BidRequest, BidResponse
from .media_type import index_impressions, media_type_for_imp


def _status_message(status_code: int) -> str:
    return (
        f"Unexpected status code: {status_code}. "
        "Run with request.debug = 1 for more info"
    )


class ResponseMapper:
    """Maps Sonobi responses back to bids on the original request."""

    def __init__(self, bidder_code: str = "sonobi"):
        self.logger = adapter_logger(bidder_code)

    def map(
        self, original_request: BidRequest, response: ResponseData
    ) -> tuple[BidSet | None, list[AdapterError]]:
        """
        Map one exchange response.

        Args:
            original_request: The canonical request the exchange call came from
            response: Status code and body returned by the transport

        Returns:
            (BidSet or None, errors). A no-bid answer is (None, []).
        """
        status = response.status_code
        log = self.logger.bind(auction_id=original_request.id)

        if status == HTTPStatus.NO_CONTENT:
            log.debug("No bid")
            return None, []

        if status == HTTPStatus.BAD_REQUEST:
            log.warning("Exchange rejected request", status_code=status)
            return None, [BadInputError(_status_message(status))]

        if status != HTTPStatus.OK:
            log.warning("Unexpected exchange status", status_code=status)
            return None, [BadServerResponseError(_status_message(status))]

        try:
            bid_response = BidResponse.from_json(response.body)
        except (TypeError, ValueError) as e:
            log.warning("Failed to decode exchange response", error=str(e))
            return None, [
                BadServerResponseError(f"Failed to decode bid response: {e}")
            ]

        bid_set = BidSet(currency=bid_response.cur)
        imps_by_id = index_impressions(original_request.imp)

        for seat_bid in bid_response.seatbid:
            for bid in seat_bid.bid:
                bid_type = media_type_for_imp(bid.impid, imps_by_id)
                if bid_type is None:
                    log.warning(
                        "Bid references unknown impression",
                        imp_id=bid.impid,
                        seat=seat_bid.seat,
                    )
                    bid_set.errors.append(
                        BadInputError(
                            f'Failed to find impression "{bid.impid}"',
                            imp_id=bid.impid,
                        )
                    )
                    continue
                bid_set.bids.append(TypedBid(bid=bid, bid_type=bid_type))

        log.debug(
            "Mapped exchange response",
            bid_count=len(bid_set.bids),
            error_count=len(bid_set.errors),
        )
        return bid_set, list(bid_set.errors)
