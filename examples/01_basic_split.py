"""
Example 1: Splitting a brokerage export into accounts and transactions

This example demonstrates:
- Reading a file that holds several tables separated by blank rows
- Inspecting the segmented tables
- Projecting tables onto the Account and Transaction shapes
"""

from pathlib import Path

from tablesplit.segmentation import (
    ACCOUNT_SHAPE,
    TRANSACTION_SHAPE,
    TableSplitPipeline,
)

EXAMPLE_CSV = Path(__file__).parent / "data" / "example.csv"


def main():
    print("="*80)
    print("Example 1: Basic Table Splitting")
    print("="*80)

    # ============================================
    # Step 1: Segment the file
    # ============================================
    print("\n[Step 1] Segmenting file...")

    pipeline = TableSplitPipeline()
    table_set = pipeline.read_tables(EXAMPLE_CSV)

    print(f"SUCCESS: Found {len(table_set)} tables")
    for i, table in enumerate(table_set.tables):
        print(f"  Table {i}: {table.width} columns, {len(table)} rows")

    # ============================================
    # Step 2: Project onto record shapes
    # ============================================
    print("\n[Step 2] Projecting tables...")

    accounts, transactions = pipeline.project_tables(
        table_set, [ACCOUNT_SHAPE, TRANSACTION_SHAPE]
    )

    for account in accounts.records:
        print(f"  {account.symbol}: {account.shares} @ {account.share_price}")

    for txn in transactions.records:
        print(f"  {txn.trade_date} {txn.transaction_type} {txn.symbol} {txn.net_amount}")


if __name__ == "__main__":
    main()
