"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from scrollmarks.models import FeatureFlags
from scrollmarks.service import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(lambda: FeatureFlags(show_access_specifiers=True)))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_scan_endpoint_uses_default_flags(client: TestClient) -> None:
    response = client.post(
        "/scan",
        json={"text": "class Widget {\npublic slots:\nvoid Widget::run() {\n", "language": "clike"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["language"] == "clike"
    assert [(m["line"], m["kind"], m["name"]) for m in data["markers"]] == [
        (1, "class", "Widget"),
        (2, "access_specifier", "pub slot"),
        (3, "function", "run"),
    ]
    assert data["markers"][1]["offset"] == len("class Widget {\n")


def test_scan_endpoint_detects_language_from_path(client: TestClient) -> None:
    response = client.post(
        "/scan",
        json={
            "text": "public int Count { get; set; }\npublic void Run() {\n",
            "path": "src/Worker.cs",
            "flags": {"show_functions": True, "show_classes": False},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["language"] == "csharp"
    assert [m["name"] for m in data["markers"]] == ["Run"]


def test_scan_endpoint_rejects_unknown_language(client: TestClient) -> None:
    response = client.post("/scan", json={"text": "", "language": "cobol"})

    assert response.status_code == 400
    assert "cobol" in response.json()["detail"]


def test_partial_request_flags_keep_service_defaults(client: TestClient) -> None:
    response = client.post(
        "/scan",
        json={
            "text": "class Widget {\nprivate:\nvoid Widget::run() {\n",
            "language": "clike",
            "flags": {"show_functions": False},
        },
    )

    assert response.status_code == 200
    assert [(m["kind"], m["name"]) for m in response.json()["markers"]] == [
        ("class", "Widget"),
        ("access_specifier", "priv"),
    ]


def test_configured_csharp_suffixes_select_csharp_rules() -> None:
    client = TestClient(create_app(csharp_suffixes=[".cake", ".cs"]))
    text = "public static class Build\n{\n"

    custom = client.post("/scan", json={"text": text, "path": "build.cake"})
    builtin = client.post("/scan", json={"text": text, "path": "build.cake.cpp"})

    assert custom.json()["language"] == "csharp"
    assert [m["name"] for m in custom.json()["markers"]] == ["Build"]
    assert builtin.json()["language"] == "clike"
