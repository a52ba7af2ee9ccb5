from users_api.config import get_settings
from users_api.observability.metrics import InMemoryMetrics


async def test_metrics_endpoint_returns_snapshot_and_counts_requests(api_client) -> None:
    m1 = await api_client.get("/metrics")
    assert m1.status_code == 200
    payload1 = m1.json()
    assert "counters" in payload1
    assert "latency_ms" in payload1

    # /metrics itself should NOT affect http_requests_total.
    m1b = await api_client.get("/metrics")
    assert m1b.json()["counters"]["http_requests_total"] == payload1["counters"]["http_requests_total"]

    created = await api_client.post("/users", json={"name": "Alice"})
    assert created.status_code == 201
    missing = await api_client.get("/users/99")
    assert missing.status_code == 404

    payload2 = (await api_client.get("/metrics")).json()
    counters = payload2["counters"]
    assert counters["http_requests_total"] == payload1["counters"]["http_requests_total"] + 2
    assert counters["http_responses_by_status"]["201"] == 1
    assert counters["http_responses_by_status"]["404"] == 1
    assert payload2["latency_ms"]["http_request_ms"]["count"] == 2
    assert payload2["users"] == {"stored": 1}


async def test_metrics_endpoint_can_be_disabled(api_client, monkeypatch) -> None:
    monkeypatch.setenv("ENABLE_METRICS_ENDPOINT", "false")
    get_settings.cache_clear()

    resp = await api_client.get("/metrics")
    assert resp.status_code == 404


def test_latency_is_aggregated_across_status_codes() -> None:
    metrics = InMemoryMetrics()
    metrics.observe_http_request(elapsed_ms=4.0, status_code=200)
    metrics.observe_http_request(elapsed_ms=10.0, status_code=404)
    metrics.observe_http_request(elapsed_ms=6.0, status_code=200)

    snapshot = metrics.snapshot()
    assert snapshot["counters"] == {
        "http_requests_total": 3,
        "http_responses_by_status": {"200": 2, "404": 1},
    }
    assert snapshot["latency_ms"]["http_request_ms"] == {"count": 3, "sum_ms": 20.0, "max_ms": 10.0}

    metrics.reset()
    assert metrics.snapshot()["counters"]["http_requests_total"] == 0
    assert metrics.snapshot()["latency_ms"]["http_request_ms"]["max_ms"] == 0.0
