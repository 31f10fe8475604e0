from .categories import (
    TestCategory,
    CategoryInfo,
    get_category_info,
    iter_categories,
    illustrated_categories,
    glossary,
)
from .markers import register_markers, marker_lines, TOOL_MARKERS

__all__ = [
    "TestCategory",
    "CategoryInfo",
    "get_category_info",
    "iter_categories",
    "illustrated_categories",
    "glossary",
    "register_markers",
    "marker_lines",
    "TOOL_MARKERS",
]
