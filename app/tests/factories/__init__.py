"""Test data factories for deterministic test data generation."""

from tests.factories.textdomain import (
    make_catalog,
    make_entry,
    write_catalog_file,
)

__all__ = [
    "make_catalog",
    "make_entry",
    "write_catalog_file",
]
