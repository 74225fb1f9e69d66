"""Batch configuration: source and report locations."""

from dataclasses import dataclass, replace
from pathlib import Path

import yaml

from salesbatch.utils.io import load_toml_config

type ConfigDict = dict[str, str | int | bool | list[str]]

PYPROJECT = "pyproject.toml"
YAML_CONFIG = "salesbatch.yaml"


@dataclass(frozen=True)
class SourcePaths:
    sellers_file: Path
    products_file: Path
    sales_dir: Path
    sales_pattern: str = "*.txt"


@dataclass(frozen=True)
class ReportPaths:
    output_dir: Path
    sellers_report: str = "reporte_vendedores.csv"
    products_report: str = "reporte_productos.csv"

    @property
    def sellers_path(self) -> Path:
        return self.output_dir / self.sellers_report

    @property
    def products_path(self) -> Path:
        return self.output_dir / self.products_report


@dataclass(frozen=True)
class PipelineConfig:
    sources: SourcePaths
    reports: ReportPaths
    delimiter: str = ";"
    encoding: str = "utf-8"
    validate_reports: bool = True


def _layout(base: Path) -> tuple[SourcePaths, ReportPaths]:
    sources = SourcePaths(
        sellers_file=base / "vendedores" / "vendedores.txt",
        products_file=base / "productos" / "productos.txt",
        sales_dir=base / "ventas",
    )
    return sources, ReportPaths(output_dir=base / "reportes")


def load_pipeline_config(
    env: str = "production",
    base_dir: str | Path | None = None,
    overrides: ConfigDict | None = None,
) -> PipelineConfig:
    """Build the configuration for an environment.

    ``base_dir`` replaces the environment's data root; ``overrides`` are
    applied last, using the keys accepted under ``[tool.salesbatch]``.
    """
    match env:
        case "production":
            root = Path("datos")
            validate_reports = True
        case "development":
            root = Path("datos_dev")
            validate_reports = True
        case "test":
            root = Path("tmp") / "datos"
            validate_reports = False
        case other:
            raise ValueError(f"Unknown environment: {other}")

    if base_dir is not None:
        root = Path(base_dir)

    sources, reports = _layout(root)
    config = PipelineConfig(sources=sources, reports=reports, validate_reports=validate_reports)
    return apply_overrides(config, overrides or {})


def apply_overrides(config: PipelineConfig, overrides: ConfigDict) -> PipelineConfig:
    sources, reports = config.sources, config.reports
    top: dict = {}

    for key, value in overrides.items():
        match key:
            case "sellers_file" | "products_file" | "sales_dir":
                sources = replace(sources, **{key: Path(value)})
            case "sales_pattern":
                sources = replace(sources, sales_pattern=str(value))
            case "output_dir":
                reports = replace(reports, output_dir=Path(value))
            case "sellers_report" | "products_report":
                reports = replace(reports, **{key: str(value)})
            case "delimiter" | "encoding":
                top[key] = str(value)
            case "validate_reports":
                if not isinstance(value, bool):
                    raise ValueError(f"validate_reports must be true or false, got {value!r}")
                top[key] = value
            case "env" | "base_dir":
                pass
            case unknown:
                raise ValueError(f"Unknown configuration key: {unknown}")

    return replace(config, sources=sources, reports=reports, **top)


def get_env_config(directory: str | Path = ".") -> ConfigDict:
    """Read overrides from salesbatch.yaml, falling back to pyproject.toml."""
    directory = Path(directory)
    yaml_path = directory / YAML_CONFIG
    if yaml_path.exists():
        with open(yaml_path) as f:
            return yaml.safe_load(f) or {}

    pyproject = directory / PYPROJECT
    if pyproject.exists():
        data = load_toml_config(pyproject)
        return data.get("tool", {}).get("salesbatch", {})
    return {}
