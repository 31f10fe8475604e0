import pytest

from qa_types.catalogue import (
    CategoryInfo,
    TestCategory,
    get_category_info,
    glossary,
    illustrated_categories,
    iter_categories,
)
from qa_types.exceptions import UnknownCategoryError


def test_ten_categories_in_document_order():
    values = [info.category.value for info in iter_categories()]
    assert values == [
        "unit",
        "integration",
        "functional",
        "performance",
        "security",
        "regression",
        "usability",
        "compatibility",
        "acceptance",
        "exploratory",
    ]
    assert len(TestCategory) == 10


def test_glossary_keeps_titles_and_descriptions():
    entries = glossary()
    assert list(entries)[0] == "Unit Testing"
    assert entries["Unit Testing"] == "Verifying a single code unit in isolation."
    assert entries["Exploratory Testing"] == "Unscripted, experience-driven defect discovery."
    assert len(entries) == 10


@pytest.mark.parametrize("name", ["unit", "Unit", "  UNIT ", TestCategory.UNIT])
def test_lookup_is_case_and_whitespace_insensitive(name):
    info = get_category_info(name)
    assert isinstance(info, CategoryInfo)
    assert info.category is TestCategory.UNIT
    assert info.title == "Unit Testing"


@pytest.mark.parametrize("name", ["smoke", "", 42, None])
def test_unknown_category_raises(name):
    with pytest.raises(UnknownCategoryError) as exc_info:
        get_category_info(name)
    assert exc_info.value.error_code == "unknown_category"
    assert exc_info.value.http_status() == 422
    assert exc_info.value.fields == ["category"]


def test_five_categories_have_examples():
    illustrated = [info.category for info in illustrated_categories()]
    assert illustrated == [
        TestCategory.UNIT,
        TestCategory.INTEGRATION,
        TestCategory.FUNCTIONAL,
        TestCategory.PERFORMANCE,
        TestCategory.SECURITY,
    ]


def test_example_modules_point_into_the_examples_package():
    for info in illustrated_categories():
        assert info.example_module.startswith(f"qa_types.examples.{info.category.value}.")


def test_manual_categories_are_not_automated():
    manual = {info.category for info in iter_categories() if not info.automated}
    assert manual == {TestCategory.USABILITY, TestCategory.EXPLORATORY}


def test_category_is_a_string():
    assert TestCategory.SECURITY == "security"
    assert str(TestCategory.SECURITY) == "security"
    assert f"{TestCategory.REGRESSION}" == "regression"


def test_category_info_is_frozen():
    info = get_category_info("regression")
    assert not info.illustrated
    with pytest.raises(AttributeError):
        info.title = "Changed"
