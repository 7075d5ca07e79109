"""Integration tests for Delivery API endpoints via TestClient."""

import inspect

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from fulfillment.api.routes import courier_router, delivery_router
from fulfillment.order_service.http_adapter import HttpOrderService
from protean.exceptions import ValidationError
from shared.deadline import Deadline


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(delivery_router)
    app.include_router(courier_router)
    return TestClient(app)


def _register_courier(client, name="Swift Couriers"):
    response = client.post("/couriers", json={"name": name})
    assert response.status_code == 201
    return response.json()["courier_id"]


def _create_delivery(client, order_id="ord-api-001", courier_id=None):
    response = client.post(
        "/deliveries",
        json={
            "order_id": order_id,
            "courier_id": courier_id or _register_courier(client),
            "email": "jane@example.com",
            "first_name": "Jane",
            "last_name": "Doe",
            "phone_number": "+1-555-0100",
            "street": "1 Main St",
            "city": "Springfield",
            "postal_code": "12345",
            "state": "IL",
        },
    )
    assert response.status_code == 201
    return response.json()["delivery_id"]


class TestDeliveryEndpoints:
    def test_create_and_read(self, client):
        delivery_id = _create_delivery(client)
        response = client.get(f"/deliveries/{delivery_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Pending"
        assert data["order_id"] == "ord-api-001"
        assert data["city"] == "Springfield"

    def test_missing_field_rejected(self, client):
        response = client.post("/deliveries", json={"order_id": "ord-1", "courier_id": "courier-001"})
        assert response.status_code == 422

    def test_read_missing(self, client):
        assert client.get("/deliveries/missing-delivery").status_code == 404

    def test_read_by_order(self, client):
        delivery_id = _create_delivery(client, order_id="ord-by-order")
        response = client.get("/deliveries/order/ord-by-order")
        assert response.json()["delivery_id"] == delivery_id

    def test_status_by_order(self, client):
        _create_delivery(client, order_id="ord-status")
        response = client.get("/deliveries/order/ord-status/status")
        assert response.json() == {"order_id": "ord-status", "status": "Pending"}

    def test_status_by_order_without_delivery(self, client):
        assert client.get("/deliveries/order/ord-none/status").status_code == 404


class TestStatusEndpoint:
    def test_start_delivery(self, client):
        delivery_id = _create_delivery(client)
        response = client.put(f"/deliveries/{delivery_id}/status", json={"status": "InProgress"})

        assert response.status_code == 200
        assert response.json() == {"status": "InProgress"}

    def test_refused_transition_answers_404(self, client):
        delivery_id = _create_delivery(client)
        response = client.put(f"/deliveries/{delivery_id}/status", json={"status": "Delivered"})
        assert response.status_code == 404

    def test_missing_delivery_answers_404(self, client):
        response = client.put("/deliveries/missing-delivery/status", json={"status": "Canceled"})
        assert response.status_code == 404

    def test_cancel_looks_up_owner(self, client, order_service):
        order_service.register_order("ord-api-cancel", "user-api-cancel")
        delivery_id = _create_delivery(client, order_id="ord-api-cancel")

        response = client.put(f"/deliveries/{delivery_id}/status", json={"status": "Canceled"})
        assert response.status_code == 200
        assert order_service.calls[0]["order_id"] == "ord-api-cancel"


class TestCourierEndpoints:
    def test_register_and_read(self, client):
        response = client.post(
            "/couriers",
            json={"name": "Swift Couriers", "email": "dispatch@swift.example", "phone_number": "+1-555-0199"},
        )
        assert response.status_code == 201
        courier_id = response.json()["courier_id"]

        data = client.get(f"/couriers/{courier_id}").json()
        assert data["name"] == "Swift Couriers"
        assert data["email"] == "dispatch@swift.example"
        assert courier_id in [courier["courier_id"] for courier in client.get("/couriers").json()]

    def test_blank_name_rejected(self, client):
        assert client.post("/couriers", json={"name": ""}).status_code == 422

    def test_read_missing(self, client):
        assert client.get("/couriers/courier-missing").status_code == 404

    def test_update(self, client):
        courier_id = _register_courier(client, name="Old Name")
        response = client.put(f"/couriers/{courier_id}", json={"name": "New Name", "phone_number": "+1-555-0123"})
        assert response.status_code == 200
        assert response.json()["name"] == "New Name"
        assert response.json()["phone_number"] == "+1-555-0123"

    def test_update_missing(self, client):
        assert client.put("/couriers/courier-missing", json={"name": "Ghost"}).status_code == 404

    def test_delete(self, client):
        courier_id = _register_courier(client, name="Idle Couriers")
        assert client.delete(f"/couriers/{courier_id}").json() == {"status": "deleted"}
        assert client.get(f"/couriers/{courier_id}").status_code == 404

    def test_delete_missing(self, client):
        assert client.delete("/couriers/courier-missing").status_code == 404

    def test_delete_refused_with_open_delivery(self, client):
        courier_id = _register_courier(client, name="Busy Couriers")
        _create_delivery(client, order_id="ord-api-busy", courier_id=courier_id)
        with pytest.raises(ValidationError):
            client.delete(f"/couriers/{courier_id}")

    def test_delivery_for_unknown_courier_refused(self, client):
        with pytest.raises(ValidationError):
            _create_delivery(client, order_id="ord-api-no-courier", courier_id="courier-missing")
        assert client.get("/deliveries/order/ord-api-no-courier").status_code == 404


class TestHttpOrderService:
    def _service(self, handler):
        client = httpx.Client(base_url="http://ordering.test", transport=httpx.MockTransport(handler))
        return HttpOrderService("http://ordering.test", client=client)

    def test_owner_lookup(self):
        def handler(request):
            assert request.url.path == "/orders/ord-001/owner"
            return httpx.Response(200, json={"order_id": "ord-001", "user_id": "user-001"})

        assert self._service(handler).get_order_owner("ord-001") == "user-001"

    def test_unknown_order(self):
        service = self._service(lambda request: httpx.Response(404, json={"detail": "Order not found"}))
        assert service.get_order_owner("ord-001") is None

    def test_ordering_unreachable(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        assert self._service(handler).get_order_owner("ord-001") is None

    def test_expired_deadline(self):
        service = self._service(lambda request: httpx.Response(200, json={"user_id": "user-001"}))
        assert service.get_order_owner("ord-001", deadline=Deadline(expires_at=0.0)) is None

    def test_unreadable_body(self):
        service = self._service(lambda request: httpx.Response(200, text="<html>bad gateway page</html>"))
        assert service.get_order_owner("ord-001") is None


class TestRouteDispatch:
    @pytest.mark.parametrize("route", delivery_router.routes + courier_router.routes, ids=lambda route: route.name)
    def test_routes_run_in_threadpool(self, route):
        assert not inspect.iscoroutinefunction(route.endpoint)
