# sdk/catalog_client.py
import httpx
import requests
from typing import Any, Dict, Optional


class CatalogClient:
    def __init__(self, base_url: str = "http://localhost:9090", timeout: int = 10,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def reset(self):
        r = self.session.post(f"{self.base_url}/reset", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    @staticmethod
    def _product_payload(name: str, price: float, description: str, category: str) -> Dict[str, Any]:
        return {"name": name, "price": price, "description": description, "category": category}

    # Listing / lookup
    def list_products(self, limit: int = 10, offset: int = 0, min_price: Optional[float] = None,
                      max_price: Optional[float] = None, name: Optional[str] = None,
                      sort_by: Optional[str] = None, category: Optional[str] = None):
        params: Dict[str, Any] = {"limit": limit, "offset": offset}
        if min_price is not None:
            params["min_price"] = min_price
        if max_price is not None:
            params["max_price"] = max_price
        if name:
            params["name"] = name
        if sort_by:
            params["sort_by"] = sort_by
        if category:
            params["category"] = category
        r = self.session.get(f"{self.base_url}/products", params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: int):
        r = self.session.get(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Mutations
    def add_product(self, name: str, price: float, description: str = "", category: str = ""):
        r = self.session.post(f"{self.base_url}/products",
                              json=self._product_payload(name, price, description, category),
                              timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: int, name: str, price: float, description: str = "", category: str = ""):
        r = self.session.put(f"{self.base_url}/products/{product_id}",
                             json=self._product_payload(name, price, description, category),
                             timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: int) -> None:
        r = self.session.delete(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        r.raise_for_status()

    # Pricing
    def calculate_price(self, name: str, quantity: int):
        r = self.session.post(f"{self.base_url}/products/calculatePrice",
                              json={"name": name, "quantity": quantity}, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Async add (example); returns the raw response so callers can inspect the status
    async def add_product_async(self, name: str, price: float, description: str = "", category: str = "",
                                transport: Optional[httpx.AsyncBaseTransport] = None):
        async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=transport) as client:
            return await client.post("/products", json=self._product_payload(name, price, description, category))
