# app/errors.py
"""Domain errors raised by the store and the request handlers.

``app.main`` translates them into plain-text HTTP responses carrying
``status_code``.
"""


class CatalogError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(CatalogError):
    """A query, path or body value could not be decoded or is out of range."""

    status_code = 400


class ProductNotFound(CatalogError):
    status_code = 404

    def __init__(self, message: str = "product not found"):
        super().__init__(message)
