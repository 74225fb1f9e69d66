"""Parse the product catalogue into a ProductRegistry."""

import logging
from collections.abc import Iterable

from salesbatch.sales.models import ProductRecord
from salesbatch.sales.registry import ProductRegistry
from salesbatch.utils.transforms import DELIMITER, parse_price, split_fields
from salesbatch.utils.types import Diagnostic, Parsed, ParseOutcome, Skipped

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = 3


def parse_product_line(
    line: str,
    line_no: int,
    source: str,
    delimiter: str = DELIMITER,
) -> ParseOutcome[ProductRecord]:
    fields = split_fields(line, delimiter)
    if len(fields) != PRODUCT_FIELDS:
        return Skipped(Diagnostic(
            source, line_no, f"expected {PRODUCT_FIELDS} fields, found {len(fields)}",
        ))

    product_id, display_name, raw_price = fields
    try:
        price = parse_price(raw_price)
    except ValueError as exc:
        return Skipped(Diagnostic(source, line_no, str(exc)))

    notes: tuple[Diagnostic, ...] = ()
    if price < 0:
        notes = (Diagnostic(
            source, line_no, f"negative price for product {product_id}, using absolute value",
        ),)
        price = abs(price)

    return Parsed(ProductRecord(product_id, display_name, price), notes)


def load_products(
    lines: Iterable[str],
    source: str,
    delimiter: str = DELIMITER,
) -> tuple[ProductRegistry, list[Diagnostic]]:
    registry = ProductRegistry()
    diagnostics: list[Diagnostic] = []

    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        match parse_product_line(line, line_no, source, delimiter):
            case Parsed(record=record, notes=notes):
                diagnostics.extend(notes)
                if registry.add(record):
                    logger.debug(f"Product {record.product_id} redefined at {source} line {line_no}")
            case Skipped(diagnostic=diag):
                diagnostics.append(diag)

    return registry, diagnostics
