# tests/test_sdk.py
import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from sdk.catalog_client import CatalogClient

app = create_app()
c = CatalogClient(base_url="http://testserver", session=TestClient(app))

def test_sdk_crud_flow():
    c.reset()
    created = c.add_product("melk", 1.5, "halfvolle melk", "zuivel")
    assert created["id"] == 4
    assert c.get_product(4) == created

    page = c.list_products(limit=10, offset=0, category="zuivel", sort_by="LnH")
    assert [p["name"] for p in page["data"]] == ["melk", "kaas"]

    updated = c.update_product(4, "volle melk", 1.75, category="zuivel")
    assert updated["price"] == 1.75

    c.delete_product(4)
    with pytest.raises(httpx.HTTPStatusError):
        c.get_product(4)

def test_sdk_calculate_price_and_filters():
    c.reset()
    assert c.calculate_price("kaas", 3)["total_price"] == 150
    page = c.list_products(limit=1, offset=1, min_price=5, max_price=40)
    assert [p["id"] for p in page["data"]] == [3]
    assert page["pagination"]["total_items"] == 2

def test_sdk_surfaces_errors():
    c.reset()
    with pytest.raises(httpx.HTTPStatusError) as exc:
        c.list_products(limit=1, offset=0, sort_by="random")
    assert exc.value.response.status_code == 400
    assert exc.value.response.text == "invalid sort_by value"

def test_sdk_async_add():
    c.reset()
    r = asyncio.run(c.add_product_async("sjaal", 12, category="kleding",
                                        transport=httpx.ASGITransport(app=app)))
    assert r.status_code == 200
    assert r.json()["id"] == 4
