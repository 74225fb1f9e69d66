"""Parse the seller source into a SellerRegistry."""

import logging
from collections.abc import Iterable

from salesbatch.sales.models import SellerRecord
from salesbatch.sales.registry import SellerRegistry
from salesbatch.utils.transforms import DELIMITER, parse_document_number, split_fields
from salesbatch.utils.types import Diagnostic, DocumentType, Parsed, ParseOutcome, Skipped

logger = logging.getLogger(__name__)

SELLER_FIELDS = 4


def parse_seller_line(
    line: str,
    line_no: int,
    source: str,
    delimiter: str = DELIMITER,
) -> ParseOutcome[SellerRecord]:
    """Turn one ``Type;Number;FirstNames;LastNames`` line into a seller."""
    fields = split_fields(line, delimiter)
    if len(fields) != SELLER_FIELDS:
        return Skipped(Diagnostic(
            source, line_no, f"expected {SELLER_FIELDS} fields, found {len(fields)}",
        ))

    doc_type, doc_number, first_names, last_names = fields
    try:
        document_type = DocumentType(doc_type)
    except ValueError:
        return Skipped(Diagnostic(source, line_no, f"unknown document type {doc_type!r}"))

    try:
        document_number = parse_document_number(doc_number)
    except ValueError as exc:
        return Skipped(Diagnostic(source, line_no, str(exc)))

    return Parsed(SellerRecord(
        document_type=document_type,
        document_number=document_number,
        first_names=first_names,
        last_names=last_names,
    ))


def load_sellers(
    lines: Iterable[str],
    source: str,
    delimiter: str = DELIMITER,
) -> tuple[SellerRegistry, list[Diagnostic]]:
    """Build a fresh registry from seller lines, collecting skip diagnostics."""
    registry = SellerRegistry()
    diagnostics: list[Diagnostic] = []

    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        match parse_seller_line(line, line_no, source, delimiter):
            case Parsed(record=record):
                if registry.add(record):
                    logger.debug(f"Seller {record.document_number} redefined at {source} line {line_no}")
            case Skipped(diagnostic=diag):
                diagnostics.append(diag)

    return registry, diagnostics
