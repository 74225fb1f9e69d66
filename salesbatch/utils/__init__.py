"""Shared utilities for the sales batch."""

from salesbatch.utils.io import read_lines, discover_files, write_output
from salesbatch.utils.transforms import split_fields, parse_document_number, parse_quantity, parse_price
from salesbatch.utils.validators import validate_dataframe, validate_non_increasing
from salesbatch.utils.types import Diagnostic, DocumentType, Parsed, ParseOutcome, Skipped
