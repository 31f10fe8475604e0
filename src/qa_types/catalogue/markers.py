"""
pytest marker registration driven by the catalogue.

Called from the test suite's `pytest_configure` hook so that `@pytest.mark.unit`,
`@pytest.mark.security`, ... are known markers and `pytest -m performance` selects by category.
"""

import logging

from .categories import iter_categories

logger = logging.getLogger(__name__)

# Markers for tests that need an external tool running. They are skipped unless enabled
# in Settings (RUN_BROWSER_TESTS / RUN_ZAP_TESTS).
TOOL_MARKERS = {
    "browser": "needs a real browser and WebDriver (enable with RUN_BROWSER_TESTS=true)",
    "zap": "needs a running OWASP ZAP proxy (enable with RUN_ZAP_TESTS=true)",
}


def marker_lines() -> list[str]:
    """`name: help` lines in the format of the `markers` ini option."""
    lines = [f"{info.category.value}: {info.description}" for info in iter_categories()]
    lines.extend(f"{name}: {help_text}" for name, help_text in TOOL_MARKERS.items())
    return lines


def register_markers(config) -> None:
    """Register one marker per testing category plus the tool markers on a pytest `Config`."""
    lines = marker_lines()
    for line in lines:
        config.addinivalue_line("markers", line)
    logger.debug("catalogue.markers.registered", extra={"count": len(lines)})
