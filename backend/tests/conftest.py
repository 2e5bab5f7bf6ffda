import httpx
import pytest

from tests.helpers import api_client, make_envelope, make_overview


class UpstreamStub:
    """Stand-in for Polygon.io: answers with ``payload`` and records requests."""

    def __init__(self):
        self.status_code = 200
        self.payload: dict = make_envelope()
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        ticker = request.url.path.rsplit("/", 1)[-1]
        payload = self.payload
        if payload.get("status") == "OK" and "results" in payload:
            payload = {**payload, "results": {**payload["results"], "ticker": ticker}}
        return httpx.Response(self.status_code, json=payload)


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture
def overview():
    return make_overview()


@pytest.fixture
async def client(upstream):
    async with api_client(upstream) as c:
        yield c
