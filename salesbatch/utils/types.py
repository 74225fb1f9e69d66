"""Shared type definitions for the batch."""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


type FilePath = str | Path
type LineNumber = int | None


class DocumentType(StrEnum):
    NATIONAL_ID = "CC"
    FOREIGN_ID = "CE"
    MINOR_ID = "TI"


class FileStatus(StrEnum):
    PROCESSED = "processed"
    SKIPPED = "skipped"
    FAILED = "failed"


class Severity(StrEnum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable problem tied to a source location."""

    source: str
    line: LineNumber
    reason: str
    severity: Severity = Severity.WARNING

    def __str__(self) -> str:
        match self.line:
            case None:
                return f"{self.source}: {self.reason}"
            case n:
                return f"{self.source} line {n}: {self.reason}"


@dataclass(frozen=True)
class Parsed[T]:
    record: T
    notes: tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class Skipped:
    diagnostic: Diagnostic


type ParseOutcome[T] = Parsed[T] | Skipped
