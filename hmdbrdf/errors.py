# hmdbrdf/errors.py
from typing import Optional


class ConverterError(Exception):
    """Base class for conversion failures that abort a run."""


class MissingFieldError(ConverterError):
    """A mandatory element is absent from a metabolite record."""

    def __init__(self, field: str, accession: Optional[str] = None):
        self.field = field
        self.accession = accession
        where = accession if accession else "<unknown accession>"
        super().__init__(f"record {where}: missing mandatory field '{field}'")


class ConfigurationError(ConverterError):
    """Bad command-line input or vocabulary files."""
