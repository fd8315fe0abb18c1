# app/database.py
import logging
import threading
from typing import Iterable, List, Optional

from .errors import ProductNotFound
from .models import Product, ProductIn

# This file holds the in-memory product collection and the lock guarding it.

logger = logging.getLogger(__name__)

SEED_PRODUCTS: List[Product] = [
    Product(id=1, price=50, name="kaas", description="een lekker stuk kaas", category="zuivel"),
    Product(id=2, price=10, name="t-shirt", description="een simpel wit t-shirt", category="shirts"),
    Product(id=3, price=35, name="nike air max", description="mooie stijlvolle schoenen", category="schoenen"),
]


class CatalogStore:
    """Ordered, process-local product collection.

    Collection order is insertion order, except that ``replace`` moves the
    replaced record to the end. Every method holds ``_lock`` for its whole
    read or read-then-mutate sequence, so id assignment cannot race.
    Records handed out are copies; mutating them does not touch the store.
    """

    def __init__(self, seed: Optional[Iterable[Product]] = None):
        self._seed = [p.model_copy() for p in (SEED_PRODUCTS if seed is None else seed)]
        self._lock = threading.Lock()
        self._products: List[Product] = [p.model_copy() for p in self._seed]

    def snapshot(self) -> List[Product]:
        with self._lock:
            return [p.model_copy() for p in self._products]

    def get(self, product_id: int) -> Optional[Product]:
        with self._lock:
            for p in self._products:
                if p.id == product_id:
                    return p.model_copy()
        return None

    def find_by_name(self, name: str) -> Optional[Product]:
        with self._lock:
            for p in self._products:
                if p.name == name:
                    return p.model_copy()
        return None

    def has_category(self, category: str) -> bool:
        wanted = category.lower()
        with self._lock:
            return any(p.category.lower() == wanted for p in self._products)

    def add(self, payload: ProductIn) -> Product:
        with self._lock:
            new_id = max((p.id for p in self._products), default=0) + 1
            product = Product(id=new_id, **payload.model_dump())
            self._products.append(product)
        logger.info("Added product %d (%s)", product.id, product.name)
        return product.model_copy()

    def replace(self, product_id: int, payload: ProductIn) -> Product:
        with self._lock:
            index = self._index_of(product_id)
            del self._products[index]
            product = Product(id=product_id, **payload.model_dump())
            self._products.append(product)
        logger.info("Updated product %d (%s)", product.id, product.name)
        return product.model_copy()

    def remove(self, product_id: int) -> None:
        with self._lock:
            del self._products[self._index_of(product_id)]
        logger.info("Deleted product %d", product_id)

    def reset(self) -> None:
        with self._lock:
            self._products = [p.model_copy() for p in self._seed]
        logger.info("Catalog reset to %d seeded products", len(self._seed))

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def _index_of(self, product_id: int) -> int:
        # caller holds the lock
        for index, p in enumerate(self._products):
            if p.id == product_id:
                return index
        raise ProductNotFound()
