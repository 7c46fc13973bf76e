from __future__ import annotations

import sys
from pathlib import Path

from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from foodorder.api.middleware.request_context import REQUEST_COUNT, UNMATCHED_ROUTE


def test_live_health_endpoint(client: TestClient) -> None:
    response = client.get("/health/live")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_metrics_endpoint_exposes_order_counters(client: TestClient) -> None:
    client.post(
        "/orders/place",
        content="foodId=2&quantity_2=1",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "foodorder_orders_placed_total" in response.text
    assert "http_requests_total" in response.text


def _path_labels() -> set[str]:
    return {
        sample.labels["path"]
        for metric in REQUEST_COUNT.collect()
        for sample in metric.samples
    }


def test_http_metrics_are_labelled_by_route_template(client: TestClient) -> None:
    for index in range(20):
        assert client.get(f"/missing-{index}").status_code == 404
    client.get("/api/orders/1")
    client.get("/api/orders/2")
    client.get("/menu/delete?id=3", follow_redirects=False)

    labels = _path_labels()
    assert UNMATCHED_ROUTE in labels
    assert "/api/orders/{order_id}" in labels
    assert "/menu/delete" in labels
    assert not any(label.startswith("/missing-") for label in labels)
    assert "/api/orders/1" not in labels


def test_app_is_only_built_by_the_factory() -> None:
    import foodorder.api.main as main_module
    from foodorder.api.main import create_app

    assert not hasattr(main_module, "app")

    first = create_app()
    second = create_app()
    assert first.state.stores is not second.state.stores
    assert first.state.stores.menu.count() == 6
