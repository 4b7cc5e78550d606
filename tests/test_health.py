import pytest
from httpx import ASGITransport, AsyncClient
from betitup.main import app

@pytest.mark.asyncio
async def test_root_is_live():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.get("/")
    assert r.status_code == 200
    assert r.text == "Backend is live"
    assert r.headers["content-type"].startswith("text/plain")

@pytest.mark.asyncio
async def test_head_root():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.head("/")
    assert r.status_code == 200

@pytest.mark.asyncio
async def test_health():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}

@pytest.mark.asyncio
async def test_cors_headers():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.get("/", headers={"Origin": "https://example.com"})
    assert r.headers["access-control-allow-origin"] == "*"
