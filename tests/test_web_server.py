"""Tests for the HTTP front end."""

from fastapi.testclient import TestClient

from playground.web_server import app

client = TestClient(app)


def test_categories():
    response = client.get("/api/categories")
    assert response.status_code == 200
    categories = response.json()["categories"]
    assert len(categories) == 10
    assert categories[0]["name"] == "HIGH_CARD"
    assert categories[-1]["strength"] == 10


def test_evaluate():
    response = client.post("/api/evaluate", json={"cards": ["A♥", "A♠", "A♦", "K♣", "K♥"]})
    assert response.status_code == 200
    body = response.json()
    assert body["category"] == "FULL_HOUSE"
    assert body["value"] == 14
    assert body["kickers"] == [13]
    assert body["description"] == "Full House, A full of K"


def test_compare():
    response = client.post(
        "/api/compare",
        json={"first": ["AH", "AS", "KD", "KC", "QH"], "second": ["KH", "KS", "QD", "QC", "JH"]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["result"] == 1
    assert body["winner"] == "first"


def test_compare_tie():
    response = client.post(
        "/api/compare",
        json={"first": ["AH", "KS", "QD", "JC", "9H"], "second": ["AS", "KD", "QC", "JH", "9S"]},
    )
    assert response.json()["winner"] == "tie"


def test_wrong_size_is_bad_request():
    response = client.post("/api/evaluate", json={"cards": ["AH", "KS", "QD", "JC"]})
    assert response.status_code == 400
    assert "exactly 5" in response.json()["detail"]


def test_invalid_suit_is_bad_request():
    response = client.post("/api/evaluate", json={"cards": ["AX", "KS", "QD", "JC", "9H"]})
    assert response.status_code == 400
    assert "suit" in response.json()["detail"]


def test_duplicate_is_bad_request():
    response = client.post("/api/evaluate", json={"cards": ["AH", "AH", "QD", "JC", "9H"]})
    assert response.status_code == 400
    assert "Duplicate" in response.json()["detail"]
