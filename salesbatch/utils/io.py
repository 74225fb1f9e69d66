"""File I/O utilities for reading sources and writing reports."""

import csv
import logging
import tomllib
from pathlib import Path

import pandas as pd

from salesbatch.utils.types import FilePath

logger = logging.getLogger(__name__)

BOM = "\ufeff"


def read_lines(path: FilePath, encoding: str = "utf-8") -> list[str]:
    """Read a text file into a list of lines without line terminators.

    A leading byte-order mark is dropped from the first line.
    """
    with open(path, encoding=encoding) as f:
        lines = [line.rstrip("\n") for line in f]
    if lines and lines[0].startswith(BOM):
        lines[0] = lines[0].removeprefix(BOM)
    return lines


def discover_files(directory: FilePath, pattern: str = "*.txt") -> list[Path]:
    """List regular files in a directory matching a glob, sorted by name."""
    directory = Path(directory)
    return sorted(p for p in directory.glob(pattern) if p.is_file())


def write_output(
    df: pd.DataFrame,
    path: FilePath,
    delimiter: str = ";",
    encoding: str = "utf-8",
) -> Path:
    """Write a report frame as delimited text with 2-decimal floats.

    Fields are written unquoted; they come from delimiter-split sources and
    cannot contain the delimiter.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(
        path,
        sep=delimiter,
        index=False,
        float_format="%.2f",
        encoding=encoding,
        lineterminator="\n",
        quoting=csv.QUOTE_NONE,
    )
    logger.info("Wrote %d rows to %s", len(df), path)
    return path


def load_toml_config(path: FilePath) -> dict:
    with open(path, "rb") as f:
        return tomllib.load(f)
