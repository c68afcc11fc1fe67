"""pytest plugin for json-flat.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_flat import FlattenConfig, flatten, unflatten


@pytest.fixture(scope="session")
def assert_flat_round_trip() -> Any:
    """Fixture that returns a callable flatten/unflatten round-trip asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to flatten() and unflatten(), which build fresh objects per call).

    Usage in tests::

        def test_export(assert_flat_round_trip):
            assert_flat_round_trip({"user": {"name": "John"}})

        def test_lossy_keys(assert_flat_round_trip):
            with pytest.raises(AssertionError, match=r"round trip"):
                assert_flat_round_trip({"a.b": 1})

    Returns:
        A callable ``_assert(doc, config=None) -> dict`` that raises
        ``AssertionError`` when ``unflatten(flatten(doc))`` differs from ``doc``
        and otherwise returns the flat mapping.
    """

    def _assert(doc: Any, config: FlattenConfig | None = None) -> dict[str, Any]:
        """Assert that ``doc`` survives a flatten/unflatten round trip.

        Args:
            doc:    Object-rooted JSON value.
            config: Optional FlattenConfig used for both directions.

        Raises:
            AssertionError: When the rebuilt tree differs, with a message
                including the flat keys and both trees.
        """
        flat = flatten(doc, config=config)
        rebuilt = unflatten(flat, config=config)
        if rebuilt != doc:
            raise AssertionError(
                f"JSON document does not survive a flat round trip\n"
                f"  original: {doc}\n"
                f"  rebuilt:  {rebuilt}\n"
                f"  flat_keys: {sorted(flat)}"
            )
        return flat

    return _assert
