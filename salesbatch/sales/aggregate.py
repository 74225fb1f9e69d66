"""Apply parsed sales lines to the seller and product registries."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from salesbatch.sales.ingest import parse_sales_header, parse_sales_line
from salesbatch.sales.models import DocumentNumber, SalesTransactionGroup
from salesbatch.sales.registry import ProductRegistry, SellerRegistry
from salesbatch.utils.transforms import DELIMITER
from salesbatch.utils.types import Diagnostic, FileStatus, Parsed, Skipped

logger = logging.getLogger(__name__)


@dataclass
class LineResult:
    total: float = 0.0
    pairs: int = 0
    units: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)


@dataclass
class FileOutcome:
    source: str
    status: FileStatus
    document_number: DocumentNumber | None = None
    lines_applied: int = 0
    pairs_applied: int = 0
    units: int = 0
    revenue: float = 0.0
    diagnostics: list[Diagnostic] = field(default_factory=list)


def apply_group(
    group: SalesTransactionGroup,
    document_number: DocumentNumber,
    sellers: SellerRegistry,
    products: ProductRegistry,
    source: str,
) -> LineResult:
    """Aggregate one sales line.

    Each resolved pair adds its quantity to the product immediately; the
    line's value is credited to the seller once all pairs are handled.
    """
    result = LineResult()

    for product_id, quantity in group.pairs:
        if product_id not in products:
            result.diagnostics.append(Diagnostic(source, group.line, f"unknown product {product_id}"))
            continue
        result.total += products.record_units(product_id, quantity)
        result.pairs += 1
        result.units += quantity

    sellers.credit(document_number, result.total)
    return result


def process_sales_file(
    lines: Sequence[str],
    source: str,
    sellers: SellerRegistry,
    products: ProductRegistry,
    delimiter: str = DELIMITER,
) -> FileOutcome:
    """Aggregate every transaction line of one seller's sales file.

    Raises SalesFileError if the header cannot be read. A header naming an
    unknown seller skips the whole file without touching either registry.
    """
    document_number = parse_sales_header(lines, source, delimiter)

    if document_number not in sellers:
        return FileOutcome(
            source=source,
            status=FileStatus.SKIPPED,
            document_number=document_number,
            diagnostics=[Diagnostic(source, 1, f"seller {document_number} is not in the seller registry")],
        )

    outcome = FileOutcome(source=source, status=FileStatus.PROCESSED, document_number=document_number)
    for line_no, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        match parse_sales_line(line, line_no, source, delimiter):
            case Parsed(record=group, notes=notes):
                outcome.diagnostics.extend(notes)
                applied = apply_group(group, document_number, sellers, products, source)
                outcome.diagnostics.extend(applied.diagnostics)
                outcome.lines_applied += 1
                outcome.pairs_applied += applied.pairs
                outcome.units += applied.units
                outcome.revenue += applied.total
            case Skipped(diagnostic=diag):
                outcome.diagnostics.append(diag)

    logger.debug(
        f"{source}: {outcome.lines_applied} lines, {outcome.pairs_applied} pairs, "
        f"revenue {outcome.revenue:,.2f}"
    )
    return outcome
