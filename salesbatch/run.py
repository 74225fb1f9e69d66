"""Main batch runner: aggregate sales files and write the ranked reports."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from salesbatch import sales
from salesbatch.config import PipelineConfig, get_env_config, load_pipeline_config
from salesbatch.errors import REGENERATE_HINT, BatchError

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def load_config(env: str, base_dir: str | None) -> PipelineConfig:
    return load_pipeline_config(env, base_dir, get_env_config())


def render_summary(result: sales.BatchResult) -> Table:
    table = Table(title="Sales batch summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Sellers", str(len(result.sellers)))
    table.add_row("Products", str(len(result.products)))
    table.add_row("Sales files processed", str(result.files_processed))
    table.add_row("Sales files skipped", str(result.files_skipped))
    table.add_row("Sales files failed", str(result.files_failed))
    table.add_row("Total revenue", f"${result.total_revenue:,.2f}")
    table.add_row("Units sold", str(result.total_units))

    match result.top_seller:
        case None:
            pass
        case seller:
            table.add_row("Top seller", f"{seller.full_name} (${seller.accumulated_revenue:,.2f})")

    match result.top_product:
        case None:
            pass
        case product:
            table.add_row("Best-selling product", f"{product.display_name} ({product.units_sold} units)")

    for name, path in result.report_paths.items():
        table.add_row(f"{name.capitalize()} report", str(path))

    return table


def validate_sources(config: PipelineConfig) -> int:
    match sales.validate(config):
        case {"status": "ok", **rest}:
            console.print(
                f"[green]Sources OK[/green]: {rest['sellers']} sellers, "
                f"{rest['products']} products, {rest['sales_files']} sales files, "
                f"{rest['warnings']} warnings"
            )
            return 0
        case {"status": "error", "message": msg}:
            err_console.print(f"[red]{msg}[/red]")
            return 1
        case _:
            err_console.print("[red]Unknown validation result[/red]")
            return 1


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Aggregate seller sales files into ranked reports")
    parser.add_argument("--env", type=str, default="production", help="Configuration environment")
    parser.add_argument("--base-dir", type=str, help="Data root, overrides the environment default")
    parser.add_argument("--validate", action="store_true", help="Only check the sources, don't aggregate")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug detail")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        config = load_config(args.env, args.base_dir)
    except ValueError as exc:
        err_console.print(f"[red]Configuration error: {exc}[/red]")
        sys.exit(1)

    if args.validate:
        sys.exit(validate_sources(config))

    console.print("[bold]Running sales batch...[/bold]")
    try:
        result = sales.run(config)
    except BatchError as exc:
        err_console.print(f"\n[bold red]ERROR:[/bold red] {exc}")
        err_console.print(f"[yellow]{REGENERATE_HINT}[/yellow]")
        sys.exit(1)

    console.print(render_summary(result))


if __name__ == "__main__":
    main()
