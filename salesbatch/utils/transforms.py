"""Field-level parsing helpers shared by the record parsers."""

import math
import re

DELIMITER = ";"
MAX_DOCUMENT_NUMBER = 2**64 - 1
MIN_QUANTITY = -(2**31)
MAX_QUANTITY = 2**31 - 1

_UNSIGNED = re.compile(r"\d+", re.ASCII)
_SIGNED = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def split_fields(line: str, delimiter: str = DELIMITER) -> list[str]:
    """Split a trimmed line into stripped fields.

    Trailing empty fields left by a trailing delimiter are discarded, so
    ``"P1;3;"`` yields two fields.
    """
    fields = [f.strip() for f in line.strip().split(delimiter)]
    while fields and not fields[-1]:
        fields.pop()
    return fields


def parse_document_number(text: str) -> int:
    """Parse an unsigned 64-bit document number."""
    text = text.strip()
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid document number {text!r}")
    value = int(text)
    if value > MAX_DOCUMENT_NUMBER:
        raise ValueError(f"document number {text!r} out of range")
    return value


def parse_quantity(text: str) -> int:
    """Parse a signed quantity that fits in 32 bits."""
    text = text.strip()
    if not _SIGNED.fullmatch(text):
        raise ValueError(f"invalid quantity {text!r}")
    value = int(text)
    if not MIN_QUANTITY <= value <= MAX_QUANTITY:
        raise ValueError(f"quantity {text!r} out of range")
    return value


def parse_price(text: str) -> float:
    """Parse a plain decimal unit price; overflow to infinity is rejected."""
    text = text.strip()
    if not _DECIMAL.fullmatch(text):
        raise ValueError(f"invalid price {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"invalid price {text!r}")
    return value
