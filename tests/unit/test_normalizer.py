"""Tests for turning drafts into dated, ordered, categorised records."""

from datetime import date

import pytest

from app.schemas.itineraries.activity import ActivityCategory
from app.utils.itinerary_parser import infer_category, normalize
from app.utils.itinerary_parser.drafts import ActivityDraft

START = date(2024, 6, 1)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Breakfast at the hostel", ActivityCategory.FOOD),
        ("Drive to the restaurant", ActivityCategory.FOOD),
        ("Check into the Hotel Artemide, then taxi", ActivityCategory.ACCOMMODATION),
        ("Train to Florence", ActivityCategory.TRANSPORTATION),
        ("Pick up the car rental", ActivityCategory.TRANSPORTATION),
        ("Visit the Uffizi", ActivityCategory.ACTIVITY),
        ("Staycation vibes at the pool", ActivityCategory.ACTIVITY),
        ("Café hopping", ActivityCategory.FOOD),
    ],
)
def test_infer_category_precedence(text: str, expected: ActivityCategory) -> None:
    assert infer_category(text) is expected


def test_dates_and_orders_per_day() -> None:
    records = normalize(
        [
            (1, [ActivityDraft(title="Colosseum"), ActivityDraft(title="Dinner in Trastevere")]),
            (3, [ActivityDraft(title="Vatican Museums")]),
        ],
        START,
        "raw",
    )

    assert [(r.title, r.date, r.order) for r in records] == [
        ("Colosseum", date(2024, 6, 1), 0),
        ("Dinner in Trastevere", date(2024, 6, 1), 1),
        ("Vatican Museums", date(2024, 6, 3), 0),
    ]
    assert records[1].category is ActivityCategory.FOOD


def test_unscheduled_day_has_no_date() -> None:
    records = normalize([(0, [ActivityDraft(title="Souvenir shopping")])], START, "raw")

    assert records[0].date is None
    assert records[0].order == 0


def test_description_lines_are_joined_and_empty_becomes_none() -> None:
    records = normalize(
        [(1, [
            ActivityDraft(title="Pantheon", description_lines=("Free entry.", "  Go early.  ")),
            ActivityDraft(title="Gelato", description_lines=("   ",)),
        ])],
        START,
        "raw",
    )

    assert records[0].description == "Free entry.   Go early."
    assert records[1].description is None


def test_category_reads_description_too() -> None:
    records = normalize(
        [(1, [ActivityDraft(title="Piazza Navona", description_lines=("grab lunch nearby",))])],
        START,
        "raw",
    )

    assert records[0].category is ActivityCategory.FOOD


def test_repeated_day_restarts_order() -> None:
    records = normalize(
        [
            (1, [ActivityDraft(title="A"), ActivityDraft(title="B")]),
            (1, [ActivityDraft(title="C")]),
        ],
        START,
        "raw",
    )

    assert [(r.title, r.order) for r in records] == [("A", 0), ("B", 1), ("C", 0)]
    assert {r.date for r in records} == {START}


def test_fallback_when_nothing_was_extracted() -> None:
    raw = "x" * 3000
    records = normalize([(0, []), (2, [])], START, raw)

    assert len(records) == 1
    fallback = records[0]
    assert fallback.title == "Generated Itinerary"
    assert fallback.description == "x" * 2000
    assert fallback.category is ActivityCategory.ACTIVITY
    assert fallback.date == START
    assert fallback.order == 0
    assert fallback.location is None


def test_day_beyond_calendar_range_is_unscheduled() -> None:
    records = normalize([(999, [ActivityDraft(title="Far future")])], date(9999, 12, 1), "raw")

    assert records[0].date is None
