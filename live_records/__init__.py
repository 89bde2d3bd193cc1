"""Live record extractor: concert records from a setlist workbook."""

__version__ = "0.1.0"
