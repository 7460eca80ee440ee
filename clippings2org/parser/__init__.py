"""Parser for Kindle clippings exports."""

from .models import ClippingEntry, EntryFields
from .parser import DELIMITER, ClippingsParser

__all__ = ["DELIMITER", "ClippingEntry", "ClippingsParser", "EntryFields"]
