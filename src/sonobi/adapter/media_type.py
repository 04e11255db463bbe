"""
Media type classification of Sonobi bids.

Sonobi does not report a bid's media type, so it is inferred from the
impression the bid answers. Rules are checked in order and the first
match wins; an impression matching no rule is treated as banner.
"""

from typing import Callable, Iterable, Optional

from ..models.bids import MediaType
from ..models.openrtb import Imp

# (predicate, media type) in priority order
MEDIA_TYPE_RULES: list[tuple[Callable[[Imp], bool], MediaType]] = [
    (lambda imp: imp.video is not None and imp.banner is None, MediaType.VIDEO),
    (lambda imp: imp.banner is not None, MediaType.BANNER),
]

DEFAULT_MEDIA_TYPE = MediaType.BANNER


def classify_impression(imp: Imp) -> MediaType:
    """Return the media type bids on this impression are typed as."""
    for predicate, media_type in MEDIA_TYPE_RULES:
        if predicate(imp):
            return media_type
    return DEFAULT_MEDIA_TYPE


def index_impressions(imps: Iterable[Imp]) -> dict[str, Imp]:
    """Map impression IDs to impressions; the first occurrence of an ID wins."""
    index: dict[str, Imp] = {}
    for imp in imps:
        index.setdefault(imp.id, imp)
    return index


def media_type_for_imp(imp_id: str, imps_by_id: dict[str, Imp]) -> Optional[MediaType]:
    """
    Look up an impression and classify it.

    Returns:
        The media type, or None when no impression has this ID
    """
    imp = imps_by_id.get(imp_id)
    if imp is None:
        return None
    return classify_impression(imp)
