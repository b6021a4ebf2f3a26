"""Integration tests for metrics endpoint."""

from __future__ import annotations


def test_metrics_endpoint_available(client):
    client.post("/format", json={"format_id": "cep", "value": "01310100"})

    response = client.get("/metrics")
    assert response.status_code == 200
    body = response.content.decode()
    assert "keymask_http_requests_total" in body
    assert 'keymask_masked_values_total{format_id="cep"}' in body


def test_unknown_formats_are_counted(client):
    client.post("/format", json={"format_id": "nope", "value": "1"})

    body = client.get("/metrics").content.decode()
    assert 'keymask_unknown_format_requests_total{strict="false"}' in body
