"""Tests for the HTTP surface."""

import logging

import pytest
from fastapi.testclient import TestClient

from main import app, resolve_log_level


@pytest.fixture
def client():
    return TestClient(app)


def _simple(*parts):
    return {
        "type": "simple",
        "parts": [{"kind": kind, "value": value} for kind, value in parts],
    }


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy"}


class TestBuildSelector:
    def test_simple(self, client):
        body = {"selector": _simple(("id", "main"), ("class", "container"), ("class", "editable"))}
        resp = client.post("/selectors", json=body)
        assert resp.status_code == 200
        assert resp.json() == {"selector": "#main.container.editable"}

    def test_compound(self, client):
        body = {
            "selector": {
                "type": "compound",
                "left": _simple(("element", "div"), ("id", "main")),
                "combinator": "+",
                "right": _simple(("element", "table"), ("id", "data")),
            }
        }
        resp = client.post("/selectors", json=body)
        assert resp.status_code == 200
        assert resp.json()["selector"] == "div#main + table#data"

    def test_duplicate_singleton_is_400(self, client):
        body = {"selector": _simple(("element", "a"), ("element", "b"))}
        resp = client.post("/selectors", json=body)
        assert resp.status_code == 400
        assert resp.json()["error"] == "DuplicateSingletonError"

    def test_order_violation_is_400(self, client):
        body = {"selector": _simple(("class", "x"), ("element", "a"))}
        resp = client.post("/selectors", json=body)
        assert resp.status_code == 400
        data = resp.json()
        assert data["error"] == "OrderViolationError"
        assert data["detail"].startswith("Selector parts should be arranged")

    def test_unknown_kind_is_422(self, client):
        body = {"selector": _simple(("universal", "*"))}
        resp = client.post("/selectors", json=body)
        assert resp.status_code == 422

    def test_extra_field_is_422(self, client):
        body = {"selector": _simple(), "extra": 1}
        resp = client.post("/selectors", json=body)
        assert resp.status_code == 422


class TestLogLevel:
    @pytest.mark.parametrize(
        "name, expected",
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), (" error ", logging.ERROR)],
    )
    def test_known_names(self, name, expected):
        assert resolve_log_level(name) == expected

    @pytest.mark.parametrize("name", ["", "VERBOSE", "Level 5"])
    def test_unknown_names_fall_back_to_info(self, name):
        assert resolve_log_level(name) == logging.INFO
