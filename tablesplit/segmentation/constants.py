"""
Constants for table segmentation and projection.
"""

from enum import Enum


# ===========================
# Table Boundaries
# ===========================

# Consecutive blank rows that terminate a table
DEFAULT_BLANK_RUN_LENGTH = 3

# A blank row is exactly one field holding the empty string
BLANK_ROW = ("",)

# Byte-order mark that survives decoding with plain "utf-8"
UTF8_BOM = "\ufeff"


# ===========================
# Field Kinds
# ===========================

class FieldKind(str, Enum):
    """
    Declared type of a record shape field.

    Usage:
        >>> from tablesplit.segmentation.constants import FieldKind
        >>> FieldKind.NUMBER.value
        'number'
    """

    TEXT = "text"
    NUMBER = "number"
