"""Tests for the ASGI entrypoint."""

import importlib

from fastapi.testclient import TestClient


def test_asgi_app_serves_seed_catalogs(monkeypatch) -> None:
    monkeypatch.setenv("FAMILY_DIET_ADMIN_TOKEN", "env-token")
    module = importlib.import_module("family_diet.api.asgi")
    client = TestClient(module.app)

    response = client.get("/legacy/videos/jeonju-bibimbap")

    assert response.status_code == 200
    assert response.json()["video"]["region"] == "전북 전주"
