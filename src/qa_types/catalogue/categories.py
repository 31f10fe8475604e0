"""
The ten categories of software testing.

Each category is described once, here. `glossary()` is the prose document in dictionary form,
`register_markers()` turns the same entries into pytest markers.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator

from qa_types.exceptions.base import UnknownCategoryError


@enum.unique
class TestCategory(str, enum.Enum):
    """
    Testing categories, in the order the document presents them.
    """

    # pytest would otherwise try to collect this class (its name starts with "Test").
    __test__ = False

    UNIT = "unit"
    INTEGRATION = "integration"
    FUNCTIONAL = "functional"
    PERFORMANCE = "performance"
    SECURITY = "security"
    REGRESSION = "regression"
    USABILITY = "usability"
    COMPATIBILITY = "compatibility"
    ACCEPTANCE = "acceptance"
    EXPLORATORY = "exploratory"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CategoryInfo:
    """Catalogue entry for one testing category."""

    category: TestCategory
    title: str
    description: str
    # False for categories that are mostly performed by people (usability, exploratory).
    automated: bool
    # Dotted path of the module illustrating the category, None when there is no example.
    example_module: str | None = None

    @property
    def illustrated(self) -> bool:
        return self.example_module is not None


_EXAMPLES = "qa_types.examples"

_CATALOGUE: tuple[CategoryInfo, ...] = (
    CategoryInfo(
        TestCategory.UNIT,
        "Unit Testing",
        "Verifying a single code unit in isolation.",
        automated=True,
        example_module=f"{_EXAMPLES}.unit.calculator",
    ),
    CategoryInfo(
        TestCategory.INTEGRATION,
        "Integration Testing",
        "Verifying interaction between multiple components/modules.",
        automated=True,
        example_module=f"{_EXAMPLES}.integration.service",
    ),
    CategoryInfo(
        TestCategory.FUNCTIONAL,
        "Functional Testing",
        "Verifying application behavior against functional requirements, typically via UI-driven interaction.",
        automated=True,
        example_module=f"{_EXAMPLES}.functional.scenario",
    ),
    CategoryInfo(
        TestCategory.PERFORMANCE,
        "Performance Testing",
        "Verifying response time, throughput, and resource usage under load.",
        automated=True,
        example_module=f"{_EXAMPLES}.performance.timing",
    ),
    CategoryInfo(
        TestCategory.SECURITY,
        "Security Testing",
        "Identifying vulnerabilities via scanning and active probing.",
        automated=True,
        example_module=f"{_EXAMPLES}.security.zap_scan",
    ),
    CategoryInfo(
        TestCategory.REGRESSION,
        "Regression Testing",
        "Re-verifying existing functionality after changes.",
        automated=True,
    ),
    CategoryInfo(
        TestCategory.USABILITY,
        "Usability Testing",
        "Evaluating user-friendliness and user experience.",
        automated=False,
    ),
    CategoryInfo(
        TestCategory.COMPATIBILITY,
        "Compatibility Testing",
        "Verifying consistent behavior across platforms/environments.",
        automated=True,
    ),
    CategoryInfo(
        TestCategory.ACCEPTANCE,
        "Acceptance Testing",
        "Validating against business/user requirements before release.",
        automated=True,
    ),
    CategoryInfo(
        TestCategory.EXPLORATORY,
        "Exploratory Testing",
        "Unscripted, experience-driven defect discovery.",
        automated=False,
    ),
)

_BY_CATEGORY: dict[TestCategory, CategoryInfo] = {info.category: info for info in _CATALOGUE}


def _coerce(category: TestCategory | str) -> TestCategory:
    if isinstance(category, TestCategory):
        return category
    if not isinstance(category, str):
        raise UnknownCategoryError(repr(category))
    try:
        return TestCategory(category.strip().lower())
    except ValueError:
        raise UnknownCategoryError(category) from None


def get_category_info(category: TestCategory | str) -> CategoryInfo:
    """
    Return the catalogue entry for `category`.

    Accepts a TestCategory member or its value in any case ("Unit", " security ").

    Raises:
        UnknownCategoryError: if the name is not one of the ten categories.
    """
    return _BY_CATEGORY[_coerce(category)]


def iter_categories() -> Iterator[CategoryInfo]:
    """Yield every catalogue entry in document order."""
    yield from _CATALOGUE


def illustrated_categories() -> list[CategoryInfo]:
    """Entries that ship an example module."""
    return [info for info in _CATALOGUE if info.illustrated]


def glossary() -> dict[str, str]:
    """Ordered `{title: description}` mapping of all categories."""
    return {info.title: info.description for info in _CATALOGUE}
