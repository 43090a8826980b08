"""Pytest configuration for dataknobs_validator tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def email_list_validator():
    """Array of trimmed, lowercased emails with at least one entry."""
    from dataknobs_validator import array, string

    return array().min_items(1).of(string().trimmed_email())


@pytest.fixture
def percentage_validator():
    """Coercing integer validator accepting 0..100."""
    from dataknobs_validator import integer

    return integer().coerce().between(0, 100)
