"""Turn model-written itinerary prose into ordered, dated activity records."""

from .exceptions import InvalidItineraryText
from .parser import parse_itinerary_text
from .segmenter import segment
from .extractor import extract_activities
from .normalizer import normalize
from .categories import infer_category

__all__ = [
    "InvalidItineraryText",
    "parse_itinerary_text",
    "segment",
    "extract_activities",
    "normalize",
    "infer_category",
]
