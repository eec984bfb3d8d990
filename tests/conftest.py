"""
Shared test fixtures for textconv tests.

Unit tests live in tests/unit (one module per source module); tests that
combine several modules or touch the filesystem live in tests/integration
and carry the ``integration`` marker.
"""

from __future__ import annotations

import pytest

from textconv.options import ParseOptions


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (crosses module boundaries)",
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def default_options() -> ParseOptions:
    return ParseOptions()


@pytest.fixture()
def bare_options() -> ParseOptions:
    """No brackets, comma separator: ``"1,2,3"`` style input."""
    return ParseOptions(lbracket="", rbracket="")
