"""Domain errors raised by the catalog and pricing core.

Route handlers translate these into HTTP responses; the core never swallows them.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog and pricing errors."""

    status_code: int = 500


class ProductNotFoundError(CatalogError):
    """Product id is unknown, or the product is not marked available.

    Both cases are reported identically so callers cannot tell them apart.
    """

    status_code = 404

    def __init__(self, product_id: int | None) -> None:
        self.product_id = product_id
        super().__init__("Product does not exist based on provided Id")


class MissingParameterError(CatalogError):
    """One or more required identifiers were not supplied."""

    status_code = 400

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"All selected parameters are required (missing: {', '.join(self.missing)})")


class InvalidInputError(CatalogError):
    """A pricing input is not a finite number."""

    status_code = 500

    def __init__(self, field_name: str, value: object) -> None:
        self.field_name = field_name
        self.value = value
        super().__init__(f"Pricing input '{field_name}' must be a finite number, got {value!r}")
