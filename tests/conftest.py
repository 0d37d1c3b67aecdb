"""
Shared pytest fixtures for the tablesplit test suite.

This module provides common fixtures used across test modules:
- Test file paths
- Isolated dead letter queue location

Usage:
    Fixtures are automatically discovered by pytest.
    Import them directly in test files - no explicit import needed.
"""

import pytest
from pathlib import Path
import sys

# Ensure the package is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))


# ===========================
# Path Fixtures
# ===========================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def fixtures_dir(project_root: Path) -> Path:
    """Return the tests/fixtures directory."""
    return project_root / "tests" / "fixtures"


@pytest.fixture(scope="session")
def statement_csv(fixtures_dir: Path) -> Path:
    """Brokerage export holding an accounts table and a transactions table."""
    return fixtures_dir / "statement.csv"
