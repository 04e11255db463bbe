"""Tests for the Sonobi Response Mapper."""

import json

import pytest

from src.sonobi.adapter import ResponseMapper
from src.sonobi.errors import BadInputError, BadServerResponseError
from src.sonobi.models import BidRequest, BidSet, MediaType, ResponseData


def _body(seatbid, **extra):
    return json.dumps({"id": "resp-1", "seatbid": seatbid, **extra}).encode("utf-8")


class TestResponseMapperStatus:
    """Test status code handling."""

    @pytest.fixture
    def mapper(self):
        return ResponseMapper()

    @pytest.fixture
    def original_request(self):
        return BidRequest.from_dict(
            {"id": "auction-1", "imp": [{"id": "imp1", "banner": {}}]}
        )

    def test_no_content(self, mapper, original_request):
        """Test that 204 is a no-bid, not an error."""
        bid_set, errors = mapper.map(original_request, ResponseData(status_code=204))

        assert bid_set is None
        assert errors == []

    def test_bad_request(self, mapper, original_request):
        """Test that 400 is reported as bad input."""
        bid_set, errors = mapper.map(original_request, ResponseData(status_code=400))

        assert bid_set is None
        assert len(errors) == 1
        assert isinstance(errors[0], BadInputError)
        assert "400" in errors[0].message

    @pytest.mark.parametrize("status", [201, 302, 404, 500, 503])
    def test_unexpected_status(self, mapper, original_request, status):
        """Test that any other non-200 status is a bad server response."""
        bid_set, errors = mapper.map(
            original_request, ResponseData(status_code=status, body=_body([]))
        )

        assert bid_set is None
        assert len(errors) == 1
        assert isinstance(errors[0], BadServerResponseError)
        assert errors[0].message == (
            f"Unexpected status code: {status}. "
            "Run with request.debug = 1 for more info"
        )

    @pytest.mark.parametrize(
        "body",
        [
            b"",
            b"not json",
            b"[]",
            b'{"seatbid": {"bid": []}}',
            b'{"seatbid": [{"bid": [{"impid": "imp1", "price": "free"}]}]}',
            b'{"seatbid": [{"bid": [{"impid": 5, "price": 1.0}]}]}',
            b'{"seatbid": [{"bid": [{"impid": "imp1", "price": true}]}]}',
        ],
    )
    def test_undecodable_body(self, mapper, original_request, body):
        """Test that a body that cannot be decoded is fatal to the mapping."""
        bid_set, errors = mapper.map(
            original_request, ResponseData(status_code=200, body=body)
        )

        assert bid_set is None
        assert len(errors) == 1
        assert isinstance(errors[0], BadServerResponseError)


class TestResponseMapperBids:
    """Test mapping of bids in a 200 response."""

    @pytest.fixture
    def mapper(self):
        return ResponseMapper()

    @pytest.fixture
    def original_request(self):
        """Request with video-only, banner, both and neither impressions."""
        return BidRequest.from_dict(
            {
                "id": "auction-1",
                "imp": [
                    {"id": "imp1", "video": {"mimes": ["video/mp4"]}},
                    {"id": "imp2", "banner": {"w": 300, "h": 250}},
                    {"id": "imp3", "banner": {"w": 300, "h": 250},
                     "video": {"mimes": ["video/mp4"]}},
                    {"id": "imp4", "native": {"request": "{}"}},
                ],
            }
        )

    def test_video_and_banner_typing(self, mapper, original_request):
        """Test that video-only imps give video bids and banner imps give banner."""
        body = _body(
            [
                {
                    "seat": "sonobi",
                    "bid": [
                        {"id": "b1", "impid": "imp1", "price": 2.5, "adm": "<VAST/>"},
                        {"id": "b2", "impid": "imp2", "price": 1.0, "adm": "<div/>"},
                    ],
                }
            ]
        )

        bid_set, errors = mapper.map(
            original_request, ResponseData(status_code=200, body=body)
        )

        assert errors == []
        assert isinstance(bid_set, BidSet)
        assert bid_set.errors == []
        assert [(b.bid.impid, b.bid_type) for b in bid_set.bids] == [
            ("imp1", MediaType.VIDEO),
            ("imp2", MediaType.BANNER),
        ]
        assert bid_set.bids[0].bid.price == 2.5
        assert bid_set.bids[0].bid.extra["adm"] == "<VAST/>"

    def test_banner_and_video_imp_is_banner(self, mapper, original_request):
        """Test that an imp offering both shapes types its bid as banner."""
        body = _body([{"bid": [{"id": "b3", "impid": "imp3", "price": 1.0}]}])

        bid_set, _ = mapper.map(original_request, ResponseData(200, body))

        assert bid_set.bids[0].bid_type == MediaType.BANNER

    def test_imp_without_shapes_is_banner(self, mapper, original_request):
        """Test the banner fallback for an imp with neither shape."""
        body = _body([{"bid": [{"id": "b4", "impid": "imp4", "price": 1.0}]}])

        bid_set, _ = mapper.map(original_request, ResponseData(200, body))

        assert bid_set.bids[0].bid_type == MediaType.BANNER

    def test_unknown_impression(self, mapper, original_request):
        """Test that a bid on an unknown imp is dropped with one error."""
        body = _body(
            [
                {
                    "bid": [
                        {"id": "b1", "impid": "imp1", "price": 1.0},
                        {"id": "b99", "impid": "imp99", "price": 9.0},
                        {"id": "b2", "impid": "imp2", "price": 1.0},
                    ]
                }
            ]
        )

        bid_set, errors = mapper.map(original_request, ResponseData(200, body))

        assert bid_set.imp_ids == ["imp1", "imp2"]
        assert len(bid_set.errors) == 1
        assert isinstance(bid_set.errors[0], BadInputError)
        assert bid_set.errors[0].imp_id == "imp99"
        assert "imp99" in bid_set.errors[0].message
        assert errors == bid_set.errors

    def test_returned_errors_independent_of_bid_set(self, mapper, original_request):
        """Test that the caller's error list is a separate list."""
        body = _body([{"bid": [{"id": "b99", "impid": "imp99", "price": 1.0}]}])

        bid_set, errors = mapper.map(original_request, ResponseData(200, body))
        errors.append(BadInputError("added by caller"))

        assert len(bid_set.errors) == 1

    def test_null_bid_fields(self, mapper, original_request):
        """Test that null id and price decode as empty and zero."""
        body = _body([{"bid": [{"id": None, "impid": "imp1", "price": None}]}])

        bid_set, errors = mapper.map(original_request, ResponseData(200, body))

        assert errors == []
        assert bid_set.bids[0].bid.id == ""
        assert bid_set.bids[0].bid.price == 0.0
        assert bid_set.bids[0].bid_type == MediaType.VIDEO

    def test_null_impid_is_unknown(self, mapper):
        """Test that a null impid never matches an impression."""
        request = BidRequest.from_dict(
            {"id": "auction-2", "imp": [{"id": "None", "banner": {}}]}
        )
        body = _body([{"bid": [{"id": "b", "impid": None, "price": 1.0}]}])

        bid_set, errors = mapper.map(request, ResponseData(200, body))

        assert bid_set.bids == []
        assert len(errors) == 1
        assert isinstance(errors[0], BadInputError)
        assert errors[0].imp_id == ""

    def test_all_bids_unknown(self, mapper, original_request):
        """Test that an all-unmapped response still returns a bid set."""
        body = _body([{"bid": [{"id": "x", "impid": "nope", "price": 1.0}]}])

        bid_set, errors = mapper.map(original_request, ResponseData(200, body))

        assert bid_set is not None
        assert bid_set.bids == []
        assert len(errors) == 1

    def test_seat_order_preserved(self, mapper, original_request):
        """Test that bids keep the exchange's seat/bid order."""
        body = _body(
            [
                {"seat": "a", "bid": [
                    {"id": "1", "impid": "imp2", "price": 1.0},
                    {"id": "2", "impid": "imp1", "price": 1.0},
                ]},
                {"seat": "b", "bid": [
                    {"id": "3", "impid": "imp3", "price": 1.0},
                ]},
            ]
        )

        bid_set, _ = mapper.map(original_request, ResponseData(200, body))

        assert [b.bid.id for b in bid_set.bids] == ["1", "2", "3"]

    def test_empty_seatbid(self, mapper, original_request):
        """Test a 200 response without seats."""
        bid_set, errors = mapper.map(original_request, ResponseData(200, b"{}"))

        assert bid_set.bids == []
        assert errors == []

    def test_currency(self, mapper, original_request):
        """Test that the response currency is carried, defaulting to USD."""
        body = _body([], cur="EUR")

        bid_set, _ = mapper.map(original_request, ResponseData(200, body))
        default_set, _ = mapper.map(original_request, ResponseData(200, _body([])))

        assert bid_set.currency == "EUR"
        assert default_set.currency == "USD"
