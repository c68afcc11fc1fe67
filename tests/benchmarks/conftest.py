"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-key flat, 1000-leaf nested, 10000-leaf wide records.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_flat import flatten


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_nested_1000() -> dict[str, Any]:
    """Generate a 1000-leaf nested document.

    Structure: 10 sections x 10 groups x (8 scalar leaves + 2-element array).
    """
    doc: dict[str, Any] = {}
    for i in range(10):
        section: dict[str, Any] = {}
        for j in range(10):
            group: dict[str, Any] = {f"field_{k}": f"v_{i}_{j}_{k}" for k in range(8)}
            group["tags"] = [i, j]
            section[f"group_{j}"] = group
        doc[f"section_{i}"] = section
    return doc


def _make_records_10000() -> dict[str, Any]:
    """Generate 1000 records of 10 fields each under a single array."""
    return {
        "records": [
            {f"col_{c}": r * 10 + c for c in range(10)} for r in range(1000)
        ]
    }


@pytest.fixture
def doc_10key() -> dict[str, Any]:
    """10-key flat document."""
    return generate_flat_object(10)


@pytest.fixture
def doc_1000leaf() -> dict[str, Any]:
    """1000-leaf nested document."""
    return _make_nested_1000()


@pytest.fixture
def doc_10000leaf() -> dict[str, Any]:
    """10000-leaf document of array records."""
    return _make_records_10000()


@pytest.fixture
def flat_10000leaf(doc_10000leaf: dict[str, Any]) -> dict[str, Any]:
    """Flat mapping of the 10000-leaf document."""
    return flatten(doc_10000leaf)
