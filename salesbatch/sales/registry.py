"""In-memory registries keyed by natural key.

A registry is created empty for each run, filled from its source file, then
mutated only through ``credit`` / ``record_units`` while sales are applied.
"""

from collections.abc import Iterator

from salesbatch.sales.models import DocumentNumber, ProductID, ProductRecord, SellerRecord


class SellerRegistry:
    def __init__(self) -> None:
        self._records: dict[DocumentNumber, SellerRecord] = {}

    def add(self, record: SellerRecord) -> bool:
        """Insert a seller; returns True when an earlier entry was replaced."""
        replaced = record.document_number in self._records
        self._records[record.document_number] = record
        return replaced

    def get(self, document_number: DocumentNumber) -> SellerRecord | None:
        return self._records.get(document_number)

    def credit(self, document_number: DocumentNumber, amount: float) -> None:
        self._records[document_number].accumulated_revenue += amount

    def total_revenue(self) -> float:
        return sum(r.accumulated_revenue for r in self._records.values())

    def __contains__(self, document_number: object) -> bool:
        return document_number in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SellerRecord]:
        return iter(self._records.values())


class ProductRegistry:
    def __init__(self) -> None:
        self._records: dict[ProductID, ProductRecord] = {}

    def add(self, record: ProductRecord) -> bool:
        replaced = record.product_id in self._records
        self._records[record.product_id] = record
        return replaced

    def get(self, product_id: ProductID) -> ProductRecord | None:
        return self._records.get(product_id)

    def record_units(self, product_id: ProductID, quantity: int) -> float:
        """Add sold units to a product and return the sale value."""
        product = self._records[product_id]
        product.units_sold += quantity
        return product.unit_price * quantity

    def total_units(self) -> int:
        return sum(r.units_sold for r in self._records.values())

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ProductRecord]:
        return iter(self._records.values())
