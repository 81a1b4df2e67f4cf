"""API tests for itinerary budgets and expense tracking."""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.routes.itineraries.itinerary_routes import get_completion_fn

MODEL_RESPONSE = """## Day 1
- Check into Hotel Bairro Alto
- Dinner at Cervejaria Ramiro: seafood
"""


@pytest.fixture(scope="module")
def client():
    app.dependency_overrides[get_completion_fn] = lambda: lambda prompt, premium=False: MODEL_RESPONSE
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.pop(get_completion_fn, None)


@pytest.fixture
def itinerary_id(client) -> int:
    response = client.post(
        "/itinerary/generate",
        json={"destination": "Lisbon", "start_date": "2024-06-01", "end_date": "2024-06-02"},
    )
    assert response.status_code == 201
    return response.json()["id"]


def add_expense(client, itinerary_id: int, **fields):
    body = {"title": "Expense", "amount": 10, **fields}
    response = client.post(f"/expenses/itineraries/{itinerary_id}", json=body)
    assert response.status_code == 201
    return response.json()


def test_set_budget_is_stored_on_itinerary(client, itinerary_id) -> None:
    response = client.put(
        f"/itinerary/{itinerary_id}/budget", json={"budget": 1500, "budget_currency": "eur"}
    )

    assert response.status_code == 200
    assert float(response.json()["budget"]) == 1500
    assert response.json()["budget_currency"] == "EUR"

    itinerary = client.get(f"/itinerary/{itinerary_id}").json()
    assert float(itinerary["budget"]) == 1500
    assert itinerary["budget_currency"] == "EUR"


def test_budget_can_be_cleared(client, itinerary_id) -> None:
    client.put(f"/itinerary/{itinerary_id}/budget", json={"budget": 800})

    response = client.put(f"/itinerary/{itinerary_id}/budget", json={"budget": None})

    assert response.json() == {"budget": None, "budget_currency": "USD"}


def test_budget_for_unknown_itinerary_is_404(client) -> None:
    assert client.put("/itinerary/999999/budget", json={"budget": 100}).status_code == 404


def test_negative_budget_is_rejected(client, itinerary_id) -> None:
    response = client.put(f"/itinerary/{itinerary_id}/budget", json={"budget": -5})

    assert response.status_code == 422


def test_generate_keeps_requested_budget(client) -> None:
    body = client.post(
        "/itinerary/generate",
        json={
            "destination": "Lisbon",
            "start_date": "2024-06-01",
            "end_date": "2024-06-02",
            "budget": 900,
        },
    ).json()

    assert float(body["budget"]) == 900
    assert body["budget_currency"] == "USD"


def test_expenses_are_listed_per_itinerary(client, itinerary_id) -> None:
    first = add_expense(client, itinerary_id, title="Hotel", amount=240, category="accommodation",
                        expense_date="2024-06-01")
    second = add_expense(client, itinerary_id, title="Seafood dinner", amount=65.5, category="food",
                         expense_date="2024-06-02")

    listed = client.get(f"/expenses/itineraries/{itinerary_id}")
    assert listed.status_code == 200
    assert [e["id"] for e in listed.json()] == [second["id"], first["id"]]

    food = client.get(f"/expenses/itineraries/{itinerary_id}", params={"category": "food"}).json()
    assert [e["title"] for e in food] == ["Seafood dinner"]


def test_summary_reports_spend_against_budget(client, itinerary_id) -> None:
    client.put(f"/itinerary/{itinerary_id}/budget", json={"budget": 300})
    add_expense(client, itinerary_id, title="Hotel", amount=240, category="accommodation")
    add_expense(client, itinerary_id, title="Tram pass", amount=6.4, category="transportation")
    add_expense(client, itinerary_id, title="Pastéis", amount=3.6, category="food")

    summary = client.get(f"/expenses/itineraries/{itinerary_id}/summary").json()

    assert float(summary["budget"]) == 300
    assert summary["currency"] == "USD"
    assert float(summary["total_spent"]) == 250
    assert float(summary["remaining"]) == 50
    assert summary["over_budget"] is False
    assert summary["expense_count"] == 3
    assert {k: float(v) for k, v in summary["expenses_by_category"].items()} == {
        "accommodation": 240,
        "transportation": 6.4,
        "food": 3.6,
    }


def test_summary_flags_overspend(client, itinerary_id) -> None:
    client.put(f"/itinerary/{itinerary_id}/budget", json={"budget": 100})
    add_expense(client, itinerary_id, title="Fado show", amount=120, category="activities")

    summary = client.get(f"/expenses/itineraries/{itinerary_id}/summary").json()

    assert float(summary["remaining"]) == -20
    assert summary["over_budget"] is True


def test_summary_without_budget_has_no_remaining(client, itinerary_id) -> None:
    add_expense(client, itinerary_id, amount=12)

    summary = client.get(f"/expenses/itineraries/{itinerary_id}/summary").json()

    assert summary["budget"] is None
    assert summary["remaining"] is None
    assert summary["over_budget"] is False
    assert float(summary["total_spent"]) == 12


def test_summary_leaves_other_currencies_out_of_total(client, itinerary_id) -> None:
    client.put(f"/itinerary/{itinerary_id}/budget", json={"budget": 500, "budget_currency": "EUR"})
    add_expense(client, itinerary_id, amount=100, currency="EUR")
    foreign = add_expense(client, itinerary_id, amount=40, currency="gbp")

    summary = client.get(f"/expenses/itineraries/{itinerary_id}/summary").json()

    assert foreign["currency"] == "GBP"
    assert float(summary["total_spent"]) == 100
    assert summary["other_currency_expense_ids"] == [foreign["id"]]


def test_expense_can_be_updated_and_deleted(client, itinerary_id) -> None:
    expense = add_expense(client, itinerary_id, title="Taxi", amount=18, category="transportation")

    updated = client.put(f"/expenses/{expense['id']}", json={"amount": 22, "title": "Taxi to airport"})
    assert updated.status_code == 200
    assert updated.json()["title"] == "Taxi to airport"
    assert float(updated.json()["amount"]) == 22
    assert updated.json()["category"] == "transportation"

    assert client.delete(f"/expenses/{expense['id']}").status_code == 204
    assert client.get(f"/expenses/{expense['id']}").status_code == 404


def test_expense_for_unknown_itinerary_is_404(client) -> None:
    response = client.post("/expenses/itineraries/999999", json={"title": "Ghost", "amount": 5})

    assert response.status_code == 404


def test_non_positive_expense_amount_is_rejected(client, itinerary_id) -> None:
    response = client.post(
        f"/expenses/itineraries/{itinerary_id}", json={"title": "Refund", "amount": 0}
    )

    assert response.status_code == 422
