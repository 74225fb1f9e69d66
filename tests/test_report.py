import pytest

from salesbatch.errors import BatchError
from salesbatch.sales.models import ProductRecord, SellerRecord
from salesbatch.sales.registry import ProductRegistry, SellerRegistry
from salesbatch.sales.report import (
    build_product_report,
    build_seller_report,
    check_reports,
    generate_reports,
)
from salesbatch.utils.types import DocumentType


@pytest.fixture
def sellers():
    registry = SellerRegistry()
    for number, first, revenue in [(30, "C", 500.0), (10, "A", 900.0), (20, "B", 500.0), (5, "D", 0.0)]:
        registry.add(SellerRecord(DocumentType.NATIONAL_ID, number, first, "X", revenue))
    return registry


@pytest.fixture
def products():
    registry = ProductRegistry()
    for pid, name, price, units in [
        ("P3", "Cable", 20.0, 4),
        ("P1", "Mouse", 20.0, 4),
        ("P2", "Hub", 10.0, 4),
        ("P4", "Laptop", 999.0, 9),
        ("P5", "Funda", 5.0, 0),
    ]:
        registry.add(ProductRecord(pid, name, price, units))
    return registry


def test_seller_report_sorted_by_revenue_then_document(sellers):
    report = build_seller_report(sellers)

    assert report["first_names"].tolist() == ["A", "B", "C", "D"]
    assert report["accumulated_revenue"].is_monotonic_decreasing


def test_product_report_tie_break(products):
    report = build_product_report(products)

    # equal units fall back to price ascending, then product id
    assert report["display_name"].tolist() == ["Laptop", "Hub", "Mouse", "Cable", "Funda"]
    assert report["units_sold"].tolist() == [9, 4, 4, 4, 0]


def test_report_ordering_is_reproducible(sellers, products):
    first = generate_reports(sellers, products)
    second = generate_reports(sellers, products)

    assert first["sellers"].equals(second["sellers"])
    assert first["products"].equals(second["products"])


def test_check_reports_rejects_negative_values(sellers, products):
    reports = generate_reports(sellers, products)
    reports["sellers"].loc[3, "accumulated_revenue"] = -1.0

    with pytest.raises(BatchError, match="validation failed"):
        check_reports(reports)


def test_check_reports_rejects_unsorted_frames(sellers, products):
    reports = generate_reports(sellers, products)
    reports["products"] = reports["products"].iloc[::-1].reset_index(drop=True)

    with pytest.raises(BatchError, match="non-increasing"):
        check_reports(reports)
