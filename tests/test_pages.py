from fastapi.testclient import TestClient

from app.api.v1 import pages
from app.main import app

client = TestClient(app)


def test_thank_you_page_with_token(monkeypatch):
    monkeypatch.setattr(pages, "THANKYOU_TOKEN", "secret-token")

    resp = client.get("/thankyou", params={"token": "secret-token"})

    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "Thank you for getting in touch!" in resp.text


def test_thank_you_page_rejects_wrong_token(monkeypatch):
    monkeypatch.setattr(pages, "THANKYOU_TOKEN", "secret-token")

    resp = client.get("/thankyou", params={"token": "guess"}, follow_redirects=False)

    assert resp.status_code == 307
    assert resp.headers["location"] == "/"


def test_thank_you_page_without_configured_token(monkeypatch):
    monkeypatch.setattr(pages, "THANKYOU_TOKEN", "")

    resp = client.get("/thankyou", params={"token": ""}, follow_redirects=False)

    assert resp.status_code == 307
