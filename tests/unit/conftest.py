"""Unit test configuration.

Every test collected from tests/unit/ gets the ``unit`` marker so the suite
can be selected with ``pytest -m unit``. A module-level ``pytestmark`` in a
conftest does not propagate to sibling test modules, hence the hook.
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the ``unit`` marker to tests under tests/unit."""
    for item in items:
        if "tests/unit" not in item.path.as_posix():
            continue
        if item.get_closest_marker("unit") is None:
            item.add_marker(pytest.mark.unit)
