import pytest
import os
from unittest.mock import patch

"""
Shared helpers for tests: common fixtures.
- `mock_env_vars` session fixture that sets neutral configuration variables.
- `small_ranges` fixture: a reduced compatibility ranges table.
- `patched_ranges` fixture that installs `small_ranges` in every module
  reading the table, so tests do not depend on the bundled ranges.json.
- `lic` fixture: a compact factory for `License` atoms.
"""


# 1. Mock environment variables (Session Scope: executed only once)
@pytest.fixture(scope="session", autouse=True)
def mock_env_vars():
    """Sets neutral environment variables to avoid configuration surprises."""
    with patch.dict(os.environ, {
        "LOG_LEVEL": "DEBUG",
        "MAX_DNF_CLAUSES": "4096",
    }):
        yield


# 2. Reduced ranges table (Pure Data)
@pytest.fixture
def small_ranges():
    """
    Returns a tuple that simulates the loaded ranges table.
    Covers plain families and a nested same-rank group.
    """
    return (
        ("GPL-1.0", "GPL-2.0", "GPL-3.0"),
        ("LGPL-2.0", "LGPL-2.1", "LGPL-3.0"),
        ("MPL-1.0", "MPL-1.1", ("MPL-2.0", "MPL-2.0-no-copyleft-exception")),
    )


@pytest.fixture
def patched_ranges(monkeypatch, small_ranges):
    """Installs `small_ranges` as the table seen by the comparator and predicate."""
    monkeypatch.setattr("license_satisfier.services.satisfaction.compare.get_ranges", lambda: small_ranges)
    monkeypatch.setattr("license_satisfier.services.satisfaction.predicate.get_ranges", lambda: small_ranges)
    yield small_ranges


# 3. Atom factory
@pytest.fixture
def lic():
    from license_satisfier.services.satisfaction.nodes import License

    def make(license_id, plus=False, exception=None):
        return License(license=license_id, plus=plus, exception=exception)

    return make
