"""Split flat delimited files holding several concatenated tables into typed datasets."""

__version__ = "0.1.0"
