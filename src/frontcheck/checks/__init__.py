"""Document checks: title validation and SEO field metrics."""

from frontcheck.checks.seo import SeoAccumulator, category_for, field_metrics, keyword_count
from frontcheck.checks.title import check_document, fix_unquoted_colon, validate_title

__all__ = [
    "SeoAccumulator",
    "category_for",
    "check_document",
    "field_metrics",
    "fix_unquoted_colon",
    "keyword_count",
    "validate_title",
]
