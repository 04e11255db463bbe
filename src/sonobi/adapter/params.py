"""
Decoding of Sonobi bidder params from ``imp.ext``.

The ext blob is decoded in two stages. First the generic bidder
envelope ``{"bidder": {...}}``, then the Sonobi params inside it:

    {"bidder": {"TagID": "1a2b3c4d5e6f"}}

Each stage reports its own error type.
"""

import json
from dataclasses import dataclass
from typing import Any

from ..errors import InvalidBidderExtensionError, InvalidBidderParamsError
from ..models.openrtb import Imp


@dataclass(frozen=True)
class SonobiParams:
    """Sonobi-specific targeting params for one impression."""

    tag_id: str

    @classmethod
    def from_bidder(cls, bidder: dict[str, Any], imp_id: str = "") -> "SonobiParams":
        """
        Build params from the bidder object of an impression ext.

        Raises:
            InvalidBidderParamsError: If TagID is missing or not a non-empty string
        """
        tag_id = bidder.get("TagID")
        if tag_id is None:
            raise InvalidBidderParamsError(
                f'Missing required bidder param "TagID" for imp "{imp_id}"',
                imp_id=imp_id,
            )
        if not isinstance(tag_id, str) or not tag_id:
            raise InvalidBidderParamsError(
                f'Bidder param "TagID" must be a non-empty string for imp "{imp_id}"',
                imp_id=imp_id,
            )
        return cls(tag_id=tag_id)


def decode_bidder_extension(ext: Any, imp_id: str = "") -> dict[str, Any]:
    """
    Decode the generic bidder envelope of an impression ext.

    Args:
        ext: Raw JSON (str/bytes) or an already decoded dict
        imp_id: Impression ID, used in error messages

    Returns:
        The bidder object

    Raises:
        InvalidBidderExtensionError: If ext is absent, not JSON, or has no bidder object
    """
    if ext is None:
        raise InvalidBidderExtensionError(
            f'Missing ext for imp "{imp_id}"', imp_id=imp_id
        )

    if isinstance(ext, (bytes, bytearray, str)):
        try:
            ext = json.loads(ext)
        except ValueError as e:
            raise InvalidBidderExtensionError(
                f'Invalid JSON in ext for imp "{imp_id}": {e}', imp_id=imp_id
            ) from e

    if not isinstance(ext, dict):
        raise InvalidBidderExtensionError(
            f'ext for imp "{imp_id}" must be an object', imp_id=imp_id
        )

    bidder = ext.get("bidder")
    if not isinstance(bidder, dict):
        raise InvalidBidderExtensionError(
            f'Missing bidder object in ext for imp "{imp_id}"', imp_id=imp_id
        )
    return bidder


def parse_imp_params(imp: Imp) -> SonobiParams:
    """Decode the Sonobi params of an impression (both stages)."""
    bidder = decode_bidder_extension(imp.ext, imp_id=imp.id)
    return SonobiParams.from_bidder(bidder, imp_id=imp.id)
