"""Tests for classifying a day's lines into activity drafts."""

from datetime import time

from app.utils.itinerary_parser import extract_activities
from app.utils.itinerary_parser.drafts import ActivityDraft


def test_bullets_with_inline_descriptions() -> None:
    drafts = extract_activities([
        "- Visit Eiffel Tower: see the iconic tower",
        "- Lunch at Café de Flore: French food",
    ])

    assert drafts == [
        ActivityDraft(title="Visit Eiffel Tower", description_lines=("see the iconic tower",)),
        ActivityDraft(
            title="Lunch at Café de Flore",
            description_lines=("French food",),
            location="Café de Flore",
        ),
    ]


def test_continuation_lines_accumulate_until_next_marker() -> None:
    drafts = extract_activities([
        "1. **Louvre Museum**",
        "   Spend the morning with the Mona Lisa.",
        "   Location: Rue de Rivoli, Paris",
        "",
        "2. Dinner cruise on the Seine",
    ])

    assert len(drafts) == 2
    assert drafts[0].title == "Louvre Museum"
    assert drafts[0].description_lines == (
        "Spend the morning with the Mona Lisa.",
        "Location: Rue de Rivoli, Paris",
    )
    assert drafts[0].location == "Rue de Rivoli"
    assert drafts[1].title == "Dinner cruise on the Seine"


def test_first_location_wins() -> None:
    drafts = extract_activities([
        "- Hike at Zion Canyon",
        "Then picnic at Riverside Walk",
    ])

    assert drafts[0].location == "Zion Canyon"


def test_prose_without_open_activity_is_dropped() -> None:
    drafts = extract_activities([
        "Welcome to Kyoto, the city of a thousand temples.",
        "- Fushimi Inari",
    ])

    assert drafts == [ActivityDraft(title="Fushimi Inari")]


def test_headings_and_rules_are_skipped() -> None:
    drafts = extract_activities([
        "- Gion stroll",
        "### Evening",
        "---",
        "=====",
        "- Kaiseki dinner",
    ])

    assert [d.title for d in drafts] == ["Gion stroll", "Kaiseki dinner"]
    assert drafts[0].description_lines == ()


def test_time_hints() -> None:
    drafts = extract_activities([
        "- 9:00 AM - Breakfast at Café Central: coffee and strudel",
        "- Schönbrunn Palace",
        "  Doors open 8:30, arrive early",
    ])

    assert drafts[0].time == time(9, 0)
    assert drafts[0].title == "Breakfast at Café Central"
    assert drafts[0].description_lines == ("coffee and strudel",)
    assert drafts[1].time == time(8, 30)


def test_long_titles_are_truncated() -> None:
    drafts = extract_activities(["- " + "A" * 300])

    assert len(drafts[0].title) == 150


def test_marker_without_title_uses_remainder() -> None:
    drafts = extract_activities(["- : Sunset at the pier"])

    assert drafts[0].title == "Sunset at the pier"
    assert drafts[0].description_lines == ()


def test_empty_marker_keeps_previous_activity_open() -> None:
    drafts = extract_activities(["- Harbour cruise", "- **", "Bring a jacket"])

    assert drafts == [ActivityDraft(title="Harbour cruise", description_lines=("Bring a jacket",))]


def test_no_lines_no_drafts() -> None:
    assert extract_activities([]) == []
