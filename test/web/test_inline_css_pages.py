"""Tests for the home page and the inline CSS page routes."""

import pytest
from fastapi.testclient import TestClient

from inline_chaos.config import Config
from inline_chaos.models import MAX_ITEMS
from inline_chaos.web_server import InlineChaosWebServer, create_app


@pytest.fixture
def client(dev_config, seeded_generator):
    server = InlineChaosWebServer(config=dev_config, generator=seeded_generator)
    return TestClient(server.app)


def test_home_page_is_html(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "/inline-css" in response.text
    assert "environment: development" in response.text


def test_inline_css_page_renders_items(client):
    response = client.get("/inline-css", params={"items": 3})

    assert response.status_code == 200
    assert response.text.count('class="chaos-item"') == 3
    assert "!important;" in response.text
    assert "onclick=" in response.text


def test_inline_css_page_escapes_handler_quotes(client):
    response = client.get("/inline-css", params={"items": 1})

    # Autoescape turns the single quotes inside alert('...') into entities
    assert "alert(&#39;You clicked item 1" in response.text


def test_inline_css_page_without_chaos(client):
    response = client.get("/inline-css", params={"items": 2, "chaos": "false"})

    assert response.status_code == 200
    assert "!important" not in response.text.split('<ul id="items">')[1]


def test_inline_css_json_matches_model_shape(client):
    response = client.get("/api/inline-css", params={"items": 4})

    assert response.status_code == 200
    data = response.json()
    assert len(data["items"]) == 4
    assert data["enable_chaos"] is True
    assert 8 <= data["font_size"] <= 72
    assert -30 <= data["rotation_degrees"] <= 30


@pytest.mark.parametrize("path", ["/inline-css", "/api/inline-css"])
@pytest.mark.parametrize("items", [-1, MAX_ITEMS + 1])
def test_out_of_range_item_count_returns_400(client, path, items):
    response = client.get(path, params={"items": items})

    assert response.status_code == 400
    assert "item_count" in response.json()["detail"]


def test_non_integer_item_count_is_rejected(client):
    response = client.get("/api/inline-css", params={"items": "lots"})

    assert response.status_code == 422


def test_create_app_reads_environment(monkeypatch):
    monkeypatch.setenv("INLINE_CHAOS_ENV", "development")

    client = TestClient(create_app())

    assert client.get("/ping").json()["environment"] == "development"


def test_production_profile_by_default(monkeypatch, seeded_generator):
    monkeypatch.delenv("INLINE_CHAOS_ENV", raising=False)
    server = InlineChaosWebServer(config=Config.from_env({}), generator=seeded_generator)

    assert TestClient(server.app).get("/ping").json()["environment"] == "production"
