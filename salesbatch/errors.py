"""Exceptions raised by the sales batch."""

REGENERATE_HINT = (
    "Check that the source files exist and follow the expected format; "
    "run salesbatch-generate to recreate them."
)


class BatchError(RuntimeError):
    """A fatal failure that aborts the whole batch."""


class SourceMissingError(BatchError):
    pass


class EmptyRegistryError(BatchError):
    pass


class SalesFileError(ValueError):
    """A sales file that cannot be processed at all; isolated per file."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason
