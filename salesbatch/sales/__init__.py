"""Sales batch: load sellers and products, aggregate sales files, write reports."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from salesbatch.config import PipelineConfig
from salesbatch.errors import EmptyRegistryError, SalesFileError, SourceMissingError
from salesbatch.sales.aggregate import FileOutcome, process_sales_file
from salesbatch.sales.export import write_reports
from salesbatch.sales.models import ProductRecord, SellerRecord
from salesbatch.sales.products import load_products
from salesbatch.sales.registry import ProductRegistry, SellerRegistry
from salesbatch.sales.report import generate_reports, rank_products, rank_sellers
from salesbatch.sales.sellers import load_sellers
from salesbatch.utils.io import discover_files, read_lines
from salesbatch.utils.types import Diagnostic, FileStatus, Severity

logger = logging.getLogger(__name__)
console = Console(stderr=True)


@dataclass
class BatchResult:
    sellers: SellerRegistry
    products: ProductRegistry
    files: list[FileOutcome] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    report_paths: dict[str, Path] = field(default_factory=dict)

    def _count(self, status: FileStatus) -> int:
        return sum(1 for f in self.files if f.status == status)

    @property
    def files_processed(self) -> int:
        return self._count(FileStatus.PROCESSED)

    @property
    def files_skipped(self) -> int:
        return self._count(FileStatus.SKIPPED)

    @property
    def files_failed(self) -> int:
        return self._count(FileStatus.FAILED)

    @property
    def total_revenue(self) -> float:
        return self.sellers.total_revenue()

    @property
    def total_units(self) -> int:
        return self.products.total_units()

    @property
    def top_seller(self) -> SellerRecord | None:
        ranked = rank_sellers(self.sellers)
        return ranked[0] if ranked else None

    @property
    def top_product(self) -> ProductRecord | None:
        ranked = rank_products(self.products)
        return ranked[0] if ranked else None

    def all_diagnostics(self) -> list[Diagnostic]:
        return self.diagnostics + [d for f in self.files for d in f.diagnostics]


def _log_diagnostics(diagnostics: list[Diagnostic]) -> None:
    for diag in diagnostics:
        match diag.severity:
            case Severity.ERROR:
                logger.error(str(diag))
            case _:
                logger.warning(str(diag))


def _read_source(path: Path, encoding: str) -> list[str]:
    try:
        return read_lines(path, encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceMissingError(f"Could not read {path}: {exc}") from exc


def check_sources(config: PipelineConfig) -> list[Path]:
    """Verify the required sources exist and return the sales files found."""
    sources = config.sources
    if not sources.sellers_file.is_file():
        raise SourceMissingError(f"Seller file not found: {sources.sellers_file}")
    if not sources.products_file.is_file():
        raise SourceMissingError(f"Product file not found: {sources.products_file}")
    if not sources.sales_dir.is_dir():
        raise SourceMissingError(f"Sales directory not found: {sources.sales_dir}")

    sales_files = discover_files(sources.sales_dir, sources.sales_pattern)
    if not sales_files:
        raise SourceMissingError(
            f"No sales files matching {sources.sales_pattern} in {sources.sales_dir}"
        )
    return sales_files


def load_registries(
    config: PipelineConfig,
) -> tuple[SellerRegistry, ProductRegistry, list[Diagnostic]]:
    """Parse the seller and product sources into fresh registries."""
    sources = config.sources

    lines = _read_source(sources.sellers_file, config.encoding)
    sellers, seller_diags = load_sellers(lines, sources.sellers_file.name, config.delimiter)
    _log_diagnostics(seller_diags)
    if not len(sellers):
        raise EmptyRegistryError(f"No valid sellers loaded from {sources.sellers_file}")
    logger.info(f"Loaded {len(sellers)} sellers from {sources.sellers_file}")

    lines = _read_source(sources.products_file, config.encoding)
    products, product_diags = load_products(lines, sources.products_file.name, config.delimiter)
    _log_diagnostics(product_diags)
    if not len(products):
        raise EmptyRegistryError(f"No valid products loaded from {sources.products_file}")
    logger.info(f"Loaded {len(products)} products from {sources.products_file}")

    return sellers, products, seller_diags + product_diags


def _process_one(
    path: Path,
    config: PipelineConfig,
    sellers: SellerRegistry,
    products: ProductRegistry,
) -> FileOutcome:
    try:
        lines = read_lines(path, encoding=config.encoding)
        return process_sales_file(lines, path.name, sellers, products, config.delimiter)
    except SalesFileError as exc:
        reason = exc.reason
    except (OSError, UnicodeDecodeError) as exc:
        reason = f"could not read file: {exc}"

    return FileOutcome(
        source=path.name,
        status=FileStatus.FAILED,
        diagnostics=[Diagnostic(path.name, None, reason, Severity.ERROR)],
    )


def validate(config: PipelineConfig) -> dict:
    """Check that sources are present and parse, without aggregating sales."""
    try:
        sales_files = check_sources(config)
        sellers, products, diagnostics = load_registries(config)
    except (SourceMissingError, EmptyRegistryError) as exc:
        return {"status": "error", "message": str(exc)}

    return {
        "status": "ok",
        "sellers": len(sellers),
        "products": len(products),
        "sales_files": len(sales_files),
        "warnings": len(diagnostics),
    }


def run(config: PipelineConfig) -> BatchResult:
    """Execute the batch: sellers, then products, then each sales file in turn.

    Raises BatchError subclasses for fatal conditions; no report is written
    in that case. Failures inside a single sales file are recorded on its
    FileOutcome and never stop the remaining files.
    """
    sales_files = check_sources(config)
    sellers, products, diagnostics = load_registries(config)
    result = BatchResult(sellers=sellers, products=products, diagnostics=diagnostics)

    console.print(f"[cyan]Processing {len(sales_files)} sales files...[/cyan]")
    for path in sales_files:
        outcome = _process_one(path, config, sellers, products)
        _log_diagnostics(outcome.diagnostics)
        result.files.append(outcome)

    logger.info(
        f"Sales files: {result.files_processed} processed, "
        f"{result.files_skipped} skipped, {result.files_failed} failed"
    )

    reports = generate_reports(sellers, products, validate=config.validate_reports)
    result.report_paths = write_reports(
        reports, config.reports, delimiter=config.delimiter, encoding=config.encoding,
    )
    return result
