"""GST invoice rates: HSN lookup table, reference data and invoice totals."""

__version__ = "0.1.0"
