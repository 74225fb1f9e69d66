from pathlib import Path

import pytest

from salesbatch.config import PipelineConfig, load_pipeline_config


def write_source(path: Path, lines: list[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def config(tmp_path) -> PipelineConfig:
    """Configuration rooted in a temporary data directory."""
    return load_pipeline_config("production", base_dir=tmp_path / "datos")


@pytest.fixture
def make_sources(config):
    """Write seller, product and sales sources for the temporary config.

    ``sales`` maps a file name to its lines.
    """

    def _make(sellers: list[str], products: list[str], sales: dict[str, list[str]]) -> PipelineConfig:
        write_source(config.sources.sellers_file, sellers)
        write_source(config.sources.products_file, products)
        config.sources.sales_dir.mkdir(parents=True, exist_ok=True)
        for name, lines in sales.items():
            write_source(config.sources.sales_dir / name, lines)
        return config

    return _make
