"""Build the ranked seller and product reports from final registry state."""

import logging

import pandas as pd

from salesbatch.errors import BatchError
from salesbatch.sales.models import (
    PRODUCT_REPORT_SCHEMA,
    SELLER_REPORT_SCHEMA,
    ProductRecord,
    SellerRecord,
)
from salesbatch.sales.registry import ProductRegistry, SellerRegistry
from salesbatch.utils.validators import validate_dataframe, validate_non_increasing

logger = logging.getLogger(__name__)

type ReportFrames = dict[str, pd.DataFrame]


def rank_sellers(sellers: SellerRegistry) -> list[SellerRecord]:
    """Revenue descending; equal revenue falls back to document number."""
    return sorted(sellers, key=lambda s: (-s.accumulated_revenue, s.document_number))


def rank_products(products: ProductRegistry) -> list[ProductRecord]:
    """Units descending, then unit price and product id ascending."""
    return sorted(products, key=lambda p: (-p.units_sold, p.unit_price, p.product_id))


def build_seller_report(sellers: SellerRegistry) -> pd.DataFrame:
    rows = [
        {
            "first_names": s.first_names,
            "last_names": s.last_names,
            "accumulated_revenue": float(s.accumulated_revenue),
        }
        for s in rank_sellers(sellers)
    ]
    return pd.DataFrame(rows, columns=list(SELLER_REPORT_SCHEMA.columns))


def build_product_report(products: ProductRegistry) -> pd.DataFrame:
    rows = [
        {
            "display_name": p.display_name,
            "unit_price": float(p.unit_price),
            "units_sold": int(p.units_sold),
        }
        for p in rank_products(products)
    ]
    return pd.DataFrame(rows, columns=list(PRODUCT_REPORT_SCHEMA.columns))


def check_reports(reports: ReportFrames) -> None:
    """Validate both report frames, raising BatchError on any failure."""
    checks = [
        ("sellers", validate_dataframe(reports["sellers"], SELLER_REPORT_SCHEMA)),
        ("sellers", validate_non_increasing(reports["sellers"], "accumulated_revenue")),
        ("products", validate_dataframe(reports["products"], PRODUCT_REPORT_SCHEMA)),
        ("products", validate_non_increasing(reports["products"], "units_sold")),
    ]

    errors = []
    for name, result in checks:
        match result:
            case {"valid": False, "errors": errs}:
                errors.extend(f"{name}: {e}" for e in errs)
            case _:
                pass

    if errors:
        raise BatchError("Report validation failed: " + "; ".join(errors[:3]))


def generate_reports(
    sellers: SellerRegistry,
    products: ProductRegistry,
    validate: bool = True,
) -> ReportFrames:
    """Assemble both ranked reports, optionally validating them."""
    reports = {
        "sellers": build_seller_report(sellers),
        "products": build_product_report(products),
    }
    if validate:
        check_reports(reports)

    logger.info(f"Reports assembled: {len(reports['sellers'])} sellers, {len(reports['products'])} products")
    return reports
