"""Integration tests for the masking endpoints."""

from __future__ import annotations

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from keymask.config import get_settings
from keymask.masking import FormatId
from keymask.server.app import create_app


@pytest.fixture()
def strict_client(monkeypatch) -> TestClient:
    monkeypatch.setenv("KEYMASK_STRICT_FORMATS", "true")
    get_settings.cache_clear()
    return TestClient(create_app())


def test_format_masks_value(client):
    response = client.post("/format", json={"format_id": "cpf", "value": "12345678901"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "format_id": "cpf",
        "value": "12345678901",
        "masked": "123.456.789-01",
        "known": True,
    }


def test_unknown_format_passes_through_by_default(client):
    response = client.post("/format", json={"format_id": "phone-usa", "value": "5551234567"})

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["masked"] == "5551234567"
    assert body["known"] is False


def test_unknown_format_is_404_when_strict(strict_client):
    response = strict_client.post(
        "/format", json={"format_id": "phone-usa", "value": "5551234567"}
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND
    body = response.json()
    assert body["format_id"] == "phone-usa"
    assert body["suggestions"][0] == "phone-us"


def test_batch_masks_every_value(client):
    response = client.post(
        "/format/batch",
        json={"format_id": "phone-br", "values": ["11987654321", "1133334444", ""]},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["masked"] == ["(11) 98765-4321", "(11) 3333-4444", ""]


def test_batch_rejects_too_many_values(client):
    response = client.post("/format/batch", json={"format_id": "cep", "values": ["1"] * 1001})

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_validation_errors_do_not_echo_input(client):
    oversized = "9" * 10_001

    response = client.post("/format", json={"format_id": "cpf", "value": oversized})

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert oversized not in response.text


def test_list_formats(client):
    response = client.get("/formats")

    assert response.status_code == status.HTTP_200_OK
    ids = [entry["id"] for entry in response.json()]
    assert ids[0] == "cpf"
    assert "time-12h" in ids


def test_list_formats_by_domain_and_region(client):
    response = client.get("/formats", params={"domain": "phone", "region": "br"})

    assert response.status_code == status.HTTP_200_OK
    assert [entry["id"] for entry in response.json()] == ["phone-br"]


def test_describe_format(client):
    response = client.get("/formats/mac-address")

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["character_class"] == "hex-upper"
    assert body["max_length"] == 12


def test_describe_unknown_format_suggests_alternatives(client):
    response = client.get("/formats/cpff")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert "cpf" in response.json()["suggestions"]


def test_health_reports_catalogue_size(client):
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["status"] == "ok"
    assert body["formats"] == len(FormatId)


def test_suggestion_limit_comes_from_settings(monkeypatch):
    monkeypatch.setenv("KEYMASK_SUGGESTION_LIMIT", "1")
    get_settings.cache_clear()
    client = TestClient(create_app())

    response = client.get("/formats/phone")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert len(response.json()["suggestions"]) == 1
