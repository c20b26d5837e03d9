import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from nft_indexer.client import IndexerClient

API_TOKEN = "test-api-token"


class FakeIndexer:
    """Records incoming requests and answers with a configurable response."""

    def __init__(self):
        self.requests = []
        self.status = 200
        self.body = ""
        self.delay = 0

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append(
            dict(
                method=request.method,
                path=request.path,
                raw_path=request.raw_path,
                headers=dict(request.headers),
                json=await request.json(),
            )
        )
        if self.delay:
            await asyncio.sleep(self.delay)
        return web.Response(
            status=self.status, text=self.body, content_type="application/json"
        )


@pytest.fixture
def fake_indexer():
    return FakeIndexer()


@pytest.fixture
async def indexer_server(fake_indexer):
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", fake_indexer.handle)
    server = TestServer(app)
    await server.start_server()
    yield server
    await server.close()


@pytest.fixture
async def client(indexer_server):
    c = IndexerClient(
        f"{indexer_server.host}:{indexer_server.port}",
        API_TOKEN,
        scheme="http",
        timeout=1,
    )
    yield c
    await c.shutdown()
