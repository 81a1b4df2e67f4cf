import re
from typing import Tuple

from app.schemas.itineraries.activity import ActivityCategory

# Evaluated top to bottom, first match wins.
CATEGORY_RULES: Tuple[Tuple[Tuple[str, ...], ActivityCategory], ...] = (
    (
        ("eat", "restaurant", "food", "dining", "breakfast", "lunch", "dinner", "meal", "cafe", "café", "bakery"),
        ActivityCategory.FOOD,
    ),
    (
        ("hotel", "stay", "accommodation", "lodging", "resort", "hostel"),
        ActivityCategory.ACCOMMODATION,
    ),
    (
        ("transport", "drive", "fly", "flight", "train", "bus", "car rental", "taxi"),
        ActivityCategory.TRANSPORTATION,
    ),
)

DEFAULT_CATEGORY = ActivityCategory.ACTIVITY

_COMPILED_RULES = tuple(
    (re.compile(r"\b(?:" + "|".join(re.escape(word) for word in keywords) + r")\b", re.IGNORECASE), category)
    for keywords, category in CATEGORY_RULES
)


def infer_category(text: str) -> ActivityCategory:
    for pattern, category in _COMPILED_RULES:
        if pattern.search(text):
            return category
    return DEFAULT_CATEGORY
