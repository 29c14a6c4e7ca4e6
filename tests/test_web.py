"""Tests for the content moderation REST endpoints."""

import pytest
from fastapi.testclient import TestClient

from contentguard.config import Settings
from contentguard.moderation.moderator import ContentModerator
from web.backend.app.main import app
from web.backend.app.routers import moderation
from web.backend.app.routers.moderation import get_moderator

PREFIX = "/api/content-moderation"


@pytest.fixture
def client():
    moderator = ContentModerator(settings=Settings())
    app.dependency_overrides[get_moderator] = lambda: moderator
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def degraded_client():
    moderator = ContentModerator(settings=Settings(catalog_path="/nonexistent/blocked_terms.yaml"))
    app.dependency_overrides[get_moderator] = lambda: moderator
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


def test_root(client):
    data = client.get("/").json()
    assert data["name"] == "contentguard API"
    assert data["docs"] == "/docs"


def test_check_blocks_critical_term(client):
    resp = client.post(f"{PREFIX}/check", json={"text": "kill yourself"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["decision"] == "BLOCK"
    assert data["category"] == "TOXIC"
    assert data["severity"] == "CRITICAL"
    assert data["score"] == 100
    assert data["matched_terms"] == ["kill yourself"]
    assert data["ai_used"] is False


def test_check_clean_review(client):
    resp = client.post(
        f"{PREFIX}/check",
        json={"text": "Loved every page of it", "content_type": "review", "user_reputation": 80},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["decision"] == "APPROVE"
    assert data["matched_terms"] is None
    assert data["reason"] == "Content appears clean"


def test_check_uses_reputation(client):
    text = "Anyone into bitcoin, crypto or forex?"
    high = client.post(f"{PREFIX}/check", json={"text": text, "user_reputation": 100}).json()
    neutral = client.post(f"{PREFIX}/check", json={"text": text}).json()
    assert high["decision"] == "APPROVE"
    assert neutral["decision"] == "FLAG"


def test_check_validation_errors(client):
    assert client.post(f"{PREFIX}/check", json={"text": ""}).status_code == 422
    assert client.post(f"{PREFIX}/check", json={}).status_code == 422
    assert client.post(f"{PREFIX}/check", json={"text": "x", "user_reputation": 150}).status_code == 422
    assert client.post(f"{PREFIX}/check", json={"text": "x", "content_type": "tweet"}).status_code == 422
    assert client.post(f"{PREFIX}/check", json={"text": "x" * 10001}).status_code == 422


def test_quick_check(client):
    blocked = client.post(f"{PREFIX}/quick-check", params={"text": "kill yourself"}).json()
    assert blocked == {"allowed": False, "needs_review": False}

    clean = client.post(f"{PREFIX}/quick-check", params={"text": "Nice book"}).json()
    assert clean == {"allowed": True, "needs_review": False}


def test_quick_check_requires_text(client):
    assert client.post(f"{PREFIX}/quick-check").status_code == 422


def test_catalog_status(client):
    data = client.get(f"{PREFIX}/catalog").json()
    assert data["degraded"] is False
    assert data["critical"] > 0
    assert data["high"] > 0


def test_catalog_status_degraded(degraded_client):
    data = degraded_client.get(f"{PREFIX}/catalog").json()
    assert data["degraded"] is True
    assert data["high"] == 0
    resp = degraded_client.post(f"{PREFIX}/check", json={"text": "kill yourself"})
    assert resp.json()["decision"] == "BLOCK"


def test_catalog_loaded_at_startup(monkeypatch):
    monkeypatch.setattr(moderation, "_moderator", None)
    with TestClient(app) as started:
        assert moderation._moderator is not None
        primed = moderation._moderator
        data = started.get(f"{PREFIX}/catalog").json()
        assert data["degraded"] is False
        assert moderation._moderator is primed
