"""Global pytest fixtures and default marks for WOLFLIX."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test folder -> default marker
FOLDER_MARKERS = {
    "unit": "unit",
    "integration": "integration",
    "contract": "contract",
    "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each item after the top-level folder it lives in, unless already marked."""
    for item in items:
        relative = item.path.resolve().relative_to(TESTS_ROOT)
        marker_name = FOLDER_MARKERS.get(relative.parts[0])
        if marker_name is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))
