"""
CLI entry point for the table splitting pipeline.

Usage:
    # Project table 0 as accounts and table 1 as transactions (default)
    python -m tablesplit.segmentation exports/statement.csv

    # Choose shapes by position; "-" skips a table
    python -m tablesplit.segmentation exports/statement.csv --shapes - transaction

    # Print the raw tables only
    python -m tablesplit.segmentation exports/statement.csv --tables-only

    # Several files, snapshotting each TableSet to JSON
    python -m tablesplit.segmentation exports/*.csv --output-dir data/tables

Every failed input is logged and recorded in the dead letter queue; the exit
status is 1 when any input failed.
"""

import argparse
import codecs
import json
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .errors import TableSplitError
from .models import RecordShape, TableSet, get_shape
from .pipeline import PipelineConfig, TableSplitPipeline
from tablesplit.utils.dead_letter_queue import DeadLetterQueue

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

DEFAULT_SHAPES = ["account", "transaction"]
SKIP_SHAPE = "-"


def _resolve_shapes(names: Sequence[str]) -> List[Optional[RecordShape]]:
    return [None if name == SKIP_SHAPE else get_shape(name) for name in names]


def _tables_payload(table_set: TableSet) -> dict:
    return {
        'file': table_set.source,
        'tables': [
            {'index': i, 'header': list(t.header), 'rows': [list(r) for r in t.rows]}
            for i, t in enumerate(table_set.tables)
        ],
    }


def _process_one(
    file_path: Path,
    pipeline: TableSplitPipeline,
    shapes: List[Optional[RecordShape]],
    args: argparse.Namespace,
) -> dict:
    """Process one input file and return the JSON payload to print."""
    start = time.time()
    table_set = pipeline.read_tables(file_path)

    if args.output_dir:
        out_path = Path(args.output_dir) / f"{file_path.stem}_tables.json"
        saved = table_set.save_to_json(out_path, overwrite=args.overwrite)
        logger.info(f"Saved {len(table_set)} table(s) to {saved}")

    if args.tables_only:
        payload = _tables_payload(table_set)
    else:
        projected = pipeline.project_tables(table_set, shapes)
        payload = {
            'file': table_set.source,
            'num_tables': len(table_set),
            'projections': [p.to_dict() for p in projected],
        }

    logger.info(f"Processed {file_path.name} in {time.time() - start:.2f}s")
    return payload


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        description="Split a multi-table delimited file into typed tables"
    )
    ap.add_argument('inputs', nargs='+', help='Input delimited file(s)')
    ap.add_argument('--shapes', nargs='+', default=DEFAULT_SHAPES,
                    help=f'Record shape per table position, "{SKIP_SHAPE}" to skip '
                         f'(default: {" ".join(DEFAULT_SHAPES)})')
    ap.add_argument('--tables-only', action='store_true', dest='tables_only',
                    help='Print segmented tables without projecting them')
    ap.add_argument('--collect-errors', action='store_true', dest='collect_errors',
                    help='Report bad rows instead of failing the whole table')
    ap.add_argument('--delimiter', type=str, default=None, help='Field separator')
    ap.add_argument('--encoding', type=str, default=None, help='Input text encoding')
    ap.add_argument('--output-dir', type=str, default=None, dest='output_dir',
                    help='Write a JSON snapshot of each TableSet to this directory')
    ap.add_argument('--overwrite', action='store_true',
                    help='Overwrite existing snapshots in --output-dir')
    ap.add_argument('--dead-letter', type=str, default=None, dest='dead_letter',
                    help='Dead letter queue path (default: logs/failed_files.json)')
    args = ap.parse_args(argv)

    try:
        shapes = _resolve_shapes(args.shapes)
    except KeyError as e:
        ap.error(str(e.args[0]))

    if args.encoding is not None:
        try:
            codecs.lookup(args.encoding)
        except LookupError:
            ap.error(f"unknown encoding: {args.encoding!r}")

    try:
        config = PipelineConfig(
            delimiter=args.delimiter,
            encoding=args.encoding,
            fail_fast=False if args.collect_errors else None,
        )
    except ValidationError as e:
        problems = "; ".join(
            f"--{err['loc'][0]}: {err['msg']}" for err in e.errors()
        )
        ap.error(problems)

    pipeline = TableSplitPipeline(config)
    dlq = DeadLetterQueue(args.dead_letter)

    failed = 0
    succeeded = []
    for raw_path in args.inputs:
        file_path = Path(raw_path)
        try:
            payload = _process_one(file_path, pipeline, shapes, args)
        except (TableSplitError, OSError, LookupError) as e:
            failed += 1
            logger.error(f"error processing {file_path}: {e}")
            dlq.add_failure(file_path, reason=type(e).__name__, error=str(e))
            continue
        succeeded.append(file_path)
        print(json.dumps(payload, indent=2, ensure_ascii=False))

    dlq.remove_successes(succeeded)

    if failed:
        logger.error(f"{failed} of {len(args.inputs)} input(s) failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
