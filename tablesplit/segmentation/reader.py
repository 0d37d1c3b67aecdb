"""
Row reader for multi-table delimited text.

Wraps the standard csv row splitter over an already-open text stream. The
stream is read headerless and flexible: rows may differ in width, and an empty
physical line comes back as a single empty field so the segmenter can count it
as a blank row. A byte-order mark left at the start of the stream is dropped
from the first field.
"""

import csv
from typing import Iterable, Iterator, List, Optional, TextIO

from tablesplit.config import settings

from .constants import UTF8_BOM


def _strip_bom(lines: Iterable[str]) -> Iterator[str]:
    first = True
    for line in lines:
        if first:
            line = line.removeprefix(UTF8_BOM)
            first = False
        yield line


def read_rows(
    stream: TextIO,
    delimiter: Optional[str] = None,
    quotechar: Optional[str] = None,
) -> Iterator[List[str]]:
    """
    Yield the rows of a delimited text stream

    Args:
        stream: Open text stream (files should be opened with newline="")
        delimiter: Field separator (default from settings)
        quotechar: Quote character (default from settings)

    Yields:
        List[str]: One row of raw field values
    """
    # pylint: disable=no-member
    delimiter = delimiter if delimiter is not None else settings.segmentation.delimiter
    quotechar = quotechar if quotechar is not None else settings.segmentation.quotechar
    # pylint: enable=no-member

    reader = csv.reader(_strip_bom(stream), delimiter=delimiter, quotechar=quotechar)
    for row in reader:
        # csv reports an empty line as []; the segmenter expects [""]
        yield row if row else [""]
