import httpx
from shared.deadline import DEADLINE_HEADER, Deadline
from shared.http_client import ServiceClient
from shared.lifecycle import TransitionResult


def _service(handler):
    client = httpx.Client(base_url="http://service.test", transport=httpx.MockTransport(handler))
    return ServiceClient("http://service.test/", client=client)


class TestServiceClient:
    def test_base_url_normalized(self):
        assert _service(lambda r: httpx.Response(200)).base_url == "http://service.test"

    def test_success_forwards_deadline(self):
        seen = {}

        def handler(request):
            seen["deadline"] = request.headers.get(DEADLINE_HEADER)
            return httpx.Response(200, json={"ok": True})

        response = _service(handler)._request("GET", "/ping", deadline=Deadline.within(30))
        assert response.json() == {"ok": True}
        assert seen["deadline"] is not None

    def test_not_found_is_returned(self):
        response = _service(lambda r: httpx.Response(404))._request("GET", "/missing")
        assert response.status_code == 404

    def test_server_error_is_none(self):
        assert _service(lambda r: httpx.Response(500))._request("GET", "/boom") is None

    def test_transport_error_is_none(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        assert _service(handler)._request("GET", "/ping") is None

    def test_expired_deadline_skips_call(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200)

        assert _service(handler)._request("GET", "/ping", deadline=Deadline(expires_at=0.0)) is None
        assert calls == []


class TestTransitionResult:
    def test_only_applied_succeeds(self):
        assert TransitionResult.APPLIED.succeeded
        assert not TransitionResult.NOT_FOUND.succeeded
        assert not TransitionResult.INVALID_TRANSITION.succeeded
