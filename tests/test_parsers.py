"""Seller and product line parsing and registry loading."""

from salesbatch.sales.models import SellerRecord
from salesbatch.sales.products import load_products, parse_product_line
from salesbatch.sales.sellers import load_sellers, parse_seller_line
from salesbatch.utils.types import DocumentType, Parsed, Skipped


# =============================================================================
# SELLERS
# =============================================================================


def test_parse_seller_line():
    outcome = parse_seller_line("CC;123;Ana;Lopez", 1, "vendedores.txt")

    assert outcome == Parsed(SellerRecord(DocumentType.NATIONAL_ID, 123, "Ana", "Lopez"))


def test_parse_seller_wrong_field_count():
    outcome = parse_seller_line("CC;123;Ana", 7, "vendedores.txt")

    assert isinstance(outcome, Skipped)
    assert outcome.diagnostic.line == 7
    assert "expected 4 fields" in outcome.diagnostic.reason


def test_parse_seller_bad_document_number():
    outcome = parse_seller_line("CC;12x;Ana;Lopez", 2, "vendedores.txt")

    assert isinstance(outcome, Skipped)
    assert "document number" in outcome.diagnostic.reason


def test_parse_seller_unknown_document_type():
    outcome = parse_seller_line("XX;123;Ana;Lopez", 1, "vendedores.txt")

    assert isinstance(outcome, Skipped)
    assert "document type" in outcome.diagnostic.reason


def test_load_sellers_counts_well_formed_lines():
    lines = ["CC;1;Ana;Lopez", "CE;2;Luis;Perez", "", "TI;3;Sofia;Diaz"]

    registry, diagnostics = load_sellers(lines, "vendedores.txt")

    assert len(registry) == 3
    assert diagnostics == []


def test_load_sellers_skips_malformed_and_reports_line_numbers():
    lines = ["CC;1;Ana;Lopez", "garbage", "CC;abc;Luis;Perez"]

    registry, diagnostics = load_sellers(lines, "vendedores.txt")

    assert len(registry) == 1
    assert [d.line for d in diagnostics] == [2, 3]
    assert all(d.source == "vendedores.txt" for d in diagnostics)


def test_load_sellers_last_write_wins():
    lines = ["CC;1;Ana;Lopez", "CC;1;Maria;Gomez"]

    registry, diagnostics = load_sellers(lines, "vendedores.txt")

    assert len(registry) == 1
    assert registry.get(1).first_names == "Maria"
    assert diagnostics == []


def test_load_sellers_empty_source():
    registry, diagnostics = load_sellers([], "vendedores.txt")

    assert len(registry) == 0
    assert diagnostics == []


# =============================================================================
# PRODUCTS
# =============================================================================


def test_parse_product_line():
    match parse_product_line("P1;Mouse;10000", 1, "productos.txt"):
        case Parsed(record=product, notes=notes):
            assert product.product_id == "P1"
            assert product.display_name == "Mouse"
            assert product.unit_price == 10000.0
            assert product.units_sold == 0
            assert notes == ()
        case other:
            raise AssertionError(f"unexpected outcome {other}")


def test_parse_product_negative_price_is_normalized():
    outcome = parse_product_line("P1;Mouse;-2500.5", 3, "productos.txt")

    assert isinstance(outcome, Parsed)
    assert outcome.record.unit_price == 2500.5
    assert len(outcome.notes) == 1
    assert "negative price" in outcome.notes[0].reason


def test_parse_product_malformed():
    assert isinstance(parse_product_line("P1;Mouse", 1, "productos.txt"), Skipped)
    assert isinstance(parse_product_line("P1;Mouse;cheap", 1, "productos.txt"), Skipped)
    assert isinstance(parse_product_line("P1;Mouse;1;2", 1, "productos.txt"), Skipped)


def test_load_products_last_write_wins_and_notes():
    lines = ["P1;Mouse;100", "P2;Teclado;-50", "P1;Mouse Pro;150", "bad line"]

    registry, diagnostics = load_products(lines, "productos.txt")

    assert len(registry) == 2
    assert registry.get("P1").display_name == "Mouse Pro"
    assert registry.get("P2").unit_price == 50.0
    assert [d.line for d in diagnostics] == [2, 4]
