import httpx
import pytest

from snapbuilder.client import ImageClient
from snapbuilder.config import ClientConfig

FAKE_ENDPOINT = "https://provider.test/v1"


def snapshot_records(descriptions, start_id=1000, type="snapshot"):
    return [
        {"id": start_id + i, "type": type, "description": desc}
        for i, desc in enumerate(descriptions)
    ]


class FakeProvider:
    """Answers GET /images with canned records; any other request is a 400."""

    def __init__(self, images=None, pages=None):
        # pages: list of image lists, served one per page
        self.pages = pages if pages is not None else [images or []]
        self.requests = []
        self.unexpected = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET" and request.url.path == "/v1/images":
            page = int(request.url.params.get("page", "1"))
            next_page = page + 1 if page < len(self.pages) else None
            return httpx.Response(200, json={
                "images": self.pages[page - 1],
                "meta": {"pagination": {
                    "page": page,
                    "per_page": int(request.url.params.get("per_page", "50")),
                    "previous_page": page - 1 or None,
                    "next_page": next_page,
                    "last_page": len(self.pages),
                    "total_entries": sum(len(p) for p in self.pages),
                }},
            })
        self.unexpected.append(f"{request.method} {request.url.path}")
        return httpx.Response(400, json={"error": {"code": "invalid_input", "message": "unexpected request"}})


@pytest.fixture
def make_client():
    """A pytest fixture building an ImageClient on top of a mock transport."""
    def _make(handler, **config) -> ImageClient:
        client_config = ClientConfig(endpoint=FAKE_ENDPOINT, token="test-token", **config)
        return ImageClient(client_config, transport=httpx.MockTransport(handler))
    return _make
