# tests/test_concurrency.py
import asyncio
import httpx

from app.main import create_app

app = create_app()

async def _add_task(i):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await ac.post("/products", json={"name": f"item-{i}", "price": i, "category": "bulk"})

async def _run_adds(n):
    return await asyncio.gather(*(_add_task(i) for i in range(n)))

def test_concurrent_adds_get_distinct_ids():
    app.state.store.reset()
    results = asyncio.run(_run_adds(20))
    assert all(r.status_code == 200 for r in results)
    ids = [r.json()["id"] for r in results]
    assert sorted(ids) == list(range(4, 24))
    assert len(app.state.store) == 23

def test_concurrent_deletes_report_each_missing_id_once():
    app.state.store.reset()

    async def _delete_twice():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            return await asyncio.gather(ac.delete("/products/1"), ac.delete("/products/1"))

    statuses = sorted(r.status_code for r in asyncio.run(_delete_twice()))
    assert statuses == [200, 404]
