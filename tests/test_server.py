import json

from fastapi.testclient import TestClient

from a2card.config import A2CardConfig
from a2card.converter import convert_a2ui_to_adaptive_card
from a2card.server import create_app

A2UI = {
    "components": [
        {"id": "root", "type": "Card", "properties": {"title": "Menu"}, "children": ["img", "when"]},
        {"id": "img", "type": "Image"},
        {"id": "when", "type": "Input", "properties": {"type": "time", "placeholder": "19:00"}},
    ],
    "rootComponentId": "root",
    "dataModel": {"table": None},
}


def _client() -> TestClient:
    return TestClient(create_app(A2CardConfig(fallback_image_url="https://img.test/placeholder.png")))


def test_health_endpoint():
    response = _client().get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_convert_endpoint_matches_converter():
    response = _client().post("/api/convert", json=A2UI)
    assert response.status_code == 200
    card = response.json()["card"]
    expected = convert_a2ui_to_adaptive_card(A2UI, A2CardConfig(fallback_image_url="https://img.test/placeholder.png"))
    assert card == expected
    assert card["body"][1]["url"] == "https://img.test/placeholder.png"
    assert card["body"][2] == {"type": "Input.Time", "id": "when", "placeholder": "19:00"}


def test_convert_endpoint_empty_payload():
    response = _client().post("/api/convert", json={})
    assert response.status_code == 200
    assert response.json()["card"] == {"type": "AdaptiveCard", "version": "1.5", "body": []}


def test_convert_endpoint_validates_shape():
    response = _client().post("/api/convert", json={"components": "nope", "rootComponentId": "r"})
    assert response.status_code == 422


def test_reply_endpoint_builds_message():
    response = _client().post("/api/reply", json={"text": json.dumps({"text": "Booked", "a2ui": A2UI})})
    assert response.status_code == 200
    payload = response.json()
    assert payload["text"] == "Booked"
    assert payload["attachments"][0]["content"]["type"] == "AdaptiveCard"


def test_reply_endpoint_plain_text():
    response = _client().post("/api/reply", json={"text": "no json here"})
    assert response.status_code == 200
    assert response.json() == {"text": "no json here", "attachments": []}


def test_convert_endpoint_accepts_numeric_root_id():
    payload = {"components": [{"id": 7, "type": "Text", "properties": {"text": "seven"}}], "rootComponentId": 7}
    response = _client().post("/api/convert", json=payload)
    assert response.status_code == 200
    assert response.json()["card"]["body"] == [{"type": "TextBlock", "text": "seven", "wrap": True}]
