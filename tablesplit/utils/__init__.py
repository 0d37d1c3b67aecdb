"""Shared utilities for CLI runs."""

from tablesplit.utils.dead_letter_queue import DeadLetterQueue

__all__ = [
    'DeadLetterQueue',
]
