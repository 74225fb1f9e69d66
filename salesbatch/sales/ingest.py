"""Parse per-seller sales files: header line plus transaction lines."""

from collections.abc import Sequence

from salesbatch.errors import SalesFileError
from salesbatch.sales.models import DocumentNumber, SalePair, SalesTransactionGroup
from salesbatch.utils.transforms import DELIMITER, parse_document_number, parse_quantity, split_fields
from salesbatch.utils.types import Diagnostic, Parsed, ParseOutcome, Skipped

HEADER_MIN_FIELDS = 2


def parse_sales_header(
    lines: Sequence[str],
    source: str,
    delimiter: str = DELIMITER,
) -> DocumentNumber:
    """Return the seller document number declared on the first line.

    Raises SalesFileError when the file is empty or the header is unusable;
    the whole file is rejected in that case.
    """
    if not lines:
        raise SalesFileError(source, "file is empty")

    fields = split_fields(lines[0], delimiter)
    if len(fields) < HEADER_MIN_FIELDS:
        raise SalesFileError(source, "first line must be DocumentType;DocumentNumber")

    try:
        return parse_document_number(fields[1])
    except ValueError as exc:
        raise SalesFileError(source, f"invalid seller document number: {exc}") from exc


def parse_sales_line(
    line: str,
    line_no: int,
    source: str,
    delimiter: str = DELIMITER,
) -> ParseOutcome[SalesTransactionGroup]:
    """Split a sales line into (product, quantity) pairs.

    Odd field counts skip the line. A pair whose quantity does not parse is
    dropped on its own; negative quantities are made positive. Both cases
    are reported in ``notes``.
    """
    fields = split_fields(line, delimiter)
    if len(fields) % 2 != 0:
        return Skipped(Diagnostic(source, line_no, f"odd number of fields ({len(fields)})"))

    pairs: list[SalePair] = []
    notes: list[Diagnostic] = []
    for product_id, raw_quantity in zip(fields[::2], fields[1::2]):
        try:
            quantity = parse_quantity(raw_quantity)
        except ValueError:
            notes.append(Diagnostic(
                source, line_no, f"invalid quantity {raw_quantity!r} for product {product_id}",
            ))
            continue
        if quantity < 0:
            notes.append(Diagnostic(
                source, line_no, f"negative quantity ({quantity}) for product {product_id}, using absolute value",
            ))
            quantity = abs(quantity)
        pairs.append((product_id, quantity))

    return Parsed(SalesTransactionGroup(line=line_no, pairs=tuple(pairs)), tuple(notes))
