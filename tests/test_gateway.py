"""Tests for the FastAPI gateway."""

import pytest
from fastapi.testclient import TestClient

from gateway.api.activities import get_resolver
from gateway.main import app, create_resolver
from lg_resolver import InvalidConfigurationError

from tests.conftest import FakeLGService


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_service(make_resolver):
    """Route the gateway to a resolver backed by the given fake service"""

    def _use(service: FakeLGService):
        resolver = make_resolver(service)
        app.dependency_overrides[get_resolver] = lambda: resolver
        return resolver

    return _use


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_resolve_activity(client, use_service):
    use_service(FakeLGService(resolutions={"greet": "Hello", "x": "A", "y": "B"}))

    response = client.post("/activities/resolve", json={
        "activity": {
            "text": "[greet], John!",
            "speak": "[greet] again",
            "suggestedActions": {"actions": [{"title": "Go", "text": "[x]", "displayText": "[y]"}]},
            "channelData": {"keep": True},
        },
        "entities": {"name": "john", "tickets": 3},
    })

    assert response.status_code == 200
    data = response.json()
    assert data["references"] == ["greet", "x", "y"]
    assert data["activity"]["text"] == "Hello, John!"
    assert data["activity"]["speak"] == "Hello again"
    assert data["activity"]["suggestedActions"]["actions"][0] == {"title": "Go", "text": "A", "displayText": "B"}
    assert data["activity"]["channelData"] == {"keep": True}


@pytest.mark.parametrize("service, payload, status", [
    (FakeLGService(resolutions={"a": "A"}), {"activity": {"text": "[a]"}, "entities": {"names": ["x"]}}, 400),
    (FakeLGService(token_status=401), {"activity": {"text": "[a]"}}, 401),
    (FakeLGService(failures={"a": 500}), {"activity": {"text": "[a]"}}, 502),
    (FakeLGService(), {"activity": {"text": "[a]"}}, 502),
])
def test_resolver_errors_map_to_status(client, use_service, service, payload, status):
    use_service(service)

    response = client.post("/activities/resolve", json=payload)

    assert response.status_code == status
    assert response.json()["detail"]


def test_missing_activity_is_a_validation_error(client, use_service):
    use_service(FakeLGService())

    response = client.post("/activities/resolve", json={"entities": {}})

    assert response.status_code == 422


def test_resolver_not_configured(client):
    response = client.post("/activities/resolve", json={"activity": {"text": "[a]"}})

    assert response.status_code == 503


def test_create_resolver_from_env(monkeypatch):
    monkeypatch.delenv("LG_CONFIG", raising=False)
    monkeypatch.setenv("LG_ENDPOINT_KEY", "key")
    monkeypatch.setenv("LG_APP_ID", "my-lg-app")
    monkeypatch.setenv("LG_ENDPOINT_URI", "https://lg.example.com")

    resolver = create_resolver()

    assert resolver.endpoint.lg_app_id == "my-lg-app"


def test_create_resolver_from_config_file(monkeypatch, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("lg:\n  endpoint_key: key\n  app_id: yaml-app\n  endpoint_uri: https://lg.example.com\n")
    monkeypatch.setenv("LG_CONFIG", str(config_file))

    assert create_resolver().endpoint.lg_app_id == "yaml-app"


def test_create_resolver_unconfigured(monkeypatch):
    monkeypatch.delenv("LG_CONFIG", raising=False)
    monkeypatch.delenv("LG_ENDPOINT_KEY", raising=False)

    with pytest.raises(InvalidConfigurationError):
        create_resolver()
