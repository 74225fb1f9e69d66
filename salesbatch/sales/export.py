"""Write the ranked reports to the configured output location."""

from pathlib import Path

from rich.console import Console

from salesbatch.config import ReportPaths
from salesbatch.sales.models import PRODUCT_REPORT_HEADERS, SELLER_REPORT_HEADERS
from salesbatch.sales.report import ReportFrames
from salesbatch.utils.io import write_output

console = Console(stderr=True)


def write_reports(
    reports: ReportFrames,
    paths: ReportPaths,
    delimiter: str = ";",
    encoding: str = "utf-8",
) -> dict[str, Path]:
    """Write seller and product reports with their output headers."""
    targets = {
        "sellers": (paths.sellers_path, SELLER_REPORT_HEADERS),
        "products": (paths.products_path, PRODUCT_REPORT_HEADERS),
    }

    written: dict[str, Path] = {}
    for name, (path, headers) in targets.items():
        frame = reports[name].rename(columns=headers)
        written[name] = write_output(frame, path, delimiter=delimiter, encoding=encoding)
        console.print(f"  [green]→[/green] {name} report: {path}")

    return written
