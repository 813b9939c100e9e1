#!/usr/bin/env python3
"""Test ping endpoint for web server"""

import pytest
from fastapi.testclient import TestClient

from inline_chaos.web_server import InlineChaosWebServer


@pytest.fixture
def client(dev_config, seeded_generator):
    """Create a TestClient for the web server."""
    server = InlineChaosWebServer(config=dev_config, generator=seeded_generator)
    return TestClient(server.app)


def test_ping_endpoint_returns_200(client):
    """Test that ping endpoint returns 200 status"""
    response = client.get("/ping")
    assert response.status_code == 200


def test_ping_endpoint_returns_ok_status(client):
    """Test that ping endpoint returns 'ok' status"""
    data = client.get("/ping").json()

    assert data["status"] == "ok"


def test_ping_endpoint_returns_timestamp(client):
    """Test that ping endpoint returns a timestamp"""
    data = client.get("/ping").json()

    assert isinstance(data["timestamp"], str)
    assert len(data["timestamp"]) > 0


def test_ping_endpoint_returns_service_and_environment(client):
    """Test that ping endpoint identifies the service and its profile"""
    data = client.get("/ping").json()

    assert data["service"] == "inline-chaos"
    assert data["environment"] == "development"
