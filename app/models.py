# app/models.py
import json
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError


class ProductIn(BaseModel):
    """Body of ``POST /products`` and ``PUT /products/{id}``.

    Every field falls back to its zero value, so a partially filled body
    still produces a record.
    """

    price: float = Field(0.0, allow_inf_nan=False)
    name: str = ""
    description: str = ""
    category: str = ""

    @classmethod
    def from_body(cls, body: bytes) -> Tuple["ProductIn", List[str]]:
        """Decode a raw request body field by field.

        Returns the decoded record together with a list of problems found
        along the way (invalid JSON, a non-object payload, fields that did
        not validate). Fields that fail are left at their zero value; an
        ``id`` in the payload is ignored.
        """
        problems: List[str] = []
        try:
            raw = json.loads(body) if body else {}
        except ValueError:
            return cls(), ["body is not valid JSON"]
        if not isinstance(raw, dict):
            return cls(), ["body is not a JSON object"]

        values: Dict[str, Any] = {}
        for key in cls.model_fields:
            if key not in raw:
                continue
            try:
                cls.model_validate({key: raw[key]})
            except ValidationError:
                problems.append(f"invalid value for '{key}'")
                continue
            values[key] = raw[key]
        return cls.model_validate(values), problems


class Product(ProductIn):
    id: int


class Pagination(BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    limit: int
    offset: int


class PaginatedProducts(BaseModel):
    data: List[Product]
    pagination: Pagination


class PriceRequest(BaseModel):
    name: StrictStr = ""
    quantity: StrictInt = 0


class PriceResponse(BaseModel):
    name: str
    quantity: int
    total_price: float
