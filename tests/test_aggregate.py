"""Sales file parsing and aggregation into the registries."""

import pytest

from salesbatch.errors import SalesFileError
from salesbatch.sales.aggregate import process_sales_file
from salesbatch.sales.ingest import parse_sales_header, parse_sales_line
from salesbatch.sales.products import load_products
from salesbatch.sales.sellers import load_sellers
from salesbatch.utils.types import FileStatus, Parsed, Skipped


@pytest.fixture
def sellers():
    registry, _ = load_sellers(["CC;123;Ana;Lopez", "CE;456;Luis;Perez"], "vendedores.txt")
    return registry


@pytest.fixture
def products():
    registry, _ = load_products(["P1;Mouse;10000", "P2;Teclado;2500.5"], "productos.txt")
    return registry


def test_header_returns_document_number():
    assert parse_sales_header(["CC;123"], "v.txt") == 123


@pytest.mark.parametrize("lines,reason", [
    ([], "empty"),
    (["CC"], "first line"),
    (["CC;abc"], "invalid seller document number"),
])
def test_header_errors_reject_file(lines, reason):
    with pytest.raises(SalesFileError, match=reason):
        parse_sales_header(lines, "v.txt")


def test_parse_sales_line_pairs():
    outcome = parse_sales_line("P1;3;P2;1", 2, "v.txt")

    assert isinstance(outcome, Parsed)
    assert outcome.record.pairs == (("P1", 3), ("P2", 1))
    assert outcome.record.line == 2


def test_parse_sales_line_odd_fields_skipped():
    outcome = parse_sales_line("P1;3;P2", 5, "v.txt")

    assert isinstance(outcome, Skipped)
    assert outcome.diagnostic.line == 5


def test_parse_sales_line_bad_quantity_drops_only_that_pair():
    outcome = parse_sales_line("P1;x;P2;4", 2, "v.txt")

    assert outcome.record.pairs == (("P2", 4),)
    assert len(outcome.notes) == 1
    assert "invalid quantity" in outcome.notes[0].reason


def test_parse_sales_line_oversized_quantity_drops_only_that_pair():
    outcome = parse_sales_line("P1;" + "9" * 400 + ";P2;1", 2, "v.txt")

    assert outcome.record.pairs == (("P2", 1),)
    assert "invalid quantity" in outcome.notes[0].reason



def test_parse_sales_line_negative_quantity_normalized():
    outcome = parse_sales_line("P1;-3", 2, "v.txt")

    assert outcome.record.pairs == (("P1", 3),)
    assert "negative quantity" in outcome.notes[0].reason


def test_single_sale_scenario(sellers, products):
    outcome = process_sales_file(["CC;123", "P1;3"], "vendedor_123.txt", sellers, products)

    assert outcome.status == FileStatus.PROCESSED
    assert sellers.get(123).accumulated_revenue == pytest.approx(30000.0)
    assert products.get("P1").units_sold == 3
    assert outcome.diagnostics == []


def test_unknown_product_skips_only_its_pair(sellers, products):
    outcome = process_sales_file(["CC;123", "P9;5;P1;2"], "vendedor_123.txt", sellers, products)

    assert sellers.get(123).accumulated_revenue == pytest.approx(20000.0)
    assert products.get("P1").units_sold == 2
    assert [d.reason for d in outcome.diagnostics] == ["unknown product P9"]
    assert outcome.pairs_applied == 1
    assert outcome.units == 2


def test_unknown_seller_skips_whole_file(sellers, products):
    outcome = process_sales_file(["CC;999", "P1;3"], "vendedor_999.txt", sellers, products)

    assert outcome.status == FileStatus.SKIPPED
    assert outcome.lines_applied == 0
    assert products.get("P1").units_sold == 0
    assert all(s.accumulated_revenue == 0 for s in sellers)
    assert "999" in outcome.diagnostics[0].reason


def test_malformed_lines_do_not_affect_siblings(sellers, products):
    lines = [
        "CE;456",
        "P1;1;P2",       # odd, skipped
        "",
        "P2;2;P1;oops",  # bad quantity on second pair only
        "P1;-1",         # normalized
    ]

    outcome = process_sales_file(lines, "vendedor_456.txt", sellers, products)

    assert outcome.lines_applied == 2
    assert products.get("P1").units_sold == 1
    assert products.get("P2").units_sold == 2
    assert sellers.get(456).accumulated_revenue == pytest.approx(2 * 2500.5 + 10000)
    assert sorted(d.line for d in outcome.diagnostics) == [2, 4, 5]


def test_revenue_and_units_invariants_across_files(sellers, products):
    process_sales_file(["CC;123", "P1;2;P2;4", "P2;1"], "a.txt", sellers, products)
    process_sales_file(["CE;456", "P1;5"], "b.txt", sellers, products)

    assert sellers.get(123).accumulated_revenue == pytest.approx(2 * 10000 + 5 * 2500.5)
    assert sellers.get(456).accumulated_revenue == pytest.approx(5 * 10000)
    assert products.get("P1").units_sold == 7
    assert products.get("P2").units_sold == 5
    assert sellers.total_revenue() == pytest.approx(
        sum(p.unit_price * p.units_sold for p in products)
    )


def test_sales_processing_never_adds_registry_entries(sellers, products):
    process_sales_file(["CC;123", "P7;1;P8;2"], "a.txt", sellers, products)

    assert len(sellers) == 2
    assert len(products) == 2
    assert "P7" not in products
