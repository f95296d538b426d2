"""Presence/quality metrics for the SEO-relevant metadata fields."""

from __future__ import annotations

from pathlib import PurePath

from frontcheck.frontmatter.quoting import unquote
from frontcheck.models.document import FieldValue, MetadataBlock
from frontcheck.models.report import FieldMetrics, OptimizationCandidate, SeoSummary

DEFAULT_MIN_KEYWORDS = 3
DEFAULT_SKIP_FILES = ("index.md", "404.md", "about.md", "contact.md", "privacy-policy.md")
OTHER_CATEGORY = "other"


def _present(value: FieldValue | None) -> bool:
    if value is None:
        return False
    if isinstance(value, list):
        return any(unquote(item).strip() for item in value)
    return bool(unquote(value).strip())


def keyword_count(value: FieldValue | None) -> int:
    """1 for a non-empty scalar, the item count for a list, otherwise 0."""
    if isinstance(value, list):
        return len(value)
    return 1 if _present(value) else 0


def field_metrics(block: MetadataBlock) -> FieldMetrics:
    count = keyword_count(block.get("keywords"))
    return FieldMetrics(
        has_title=_present(block.get("title")),
        has_description=_present(block.get("description")),
        has_keywords=count > 0,
        keyword_count=count,
    )


def category_for(relative_path: PurePath) -> str:
    """Top-level directory of *relative_path*, lower-cased; root files are ``other``."""
    if len(relative_path.parts) < 2:
        return OTHER_CATEGORY
    return relative_path.parts[0].lower()


class SeoAccumulator:
    """Folds per-document metrics into a :class:`SeoSummary`.

    Documents without a metadata block count towards the total only.
    """

    def __init__(self, *, min_keywords: int = DEFAULT_MIN_KEYWORDS) -> None:
        self._min_keywords = min_keywords
        self.summary = SeoSummary()

    def add(self, relative_path: PurePath, block: MetadataBlock | None) -> FieldMetrics | None:
        self.summary.total += 1
        if block is None:
            return None

        metrics = field_metrics(block)
        summary = self.summary
        summary.with_frontmatter += 1
        if metrics.has_title:
            summary.with_title += 1
        if metrics.has_description:
            summary.with_description += 1
        if metrics.has_keywords:
            summary.with_keywords += 1
            summary.total_keywords += metrics.keyword_count

        category = category_for(relative_path)
        summary.by_category[category] = summary.by_category.get(category, 0) + 1

        low_keywords = metrics.keyword_count < self._min_keywords
        if not metrics.has_title or not metrics.has_description or low_keywords:
            summary.needs_optimization.append(
                OptimizationCandidate(
                    path=relative_path.as_posix(),
                    missing_title=not metrics.has_title,
                    missing_description=not metrics.has_description,
                    low_keywords=low_keywords,
                    keyword_count=metrics.keyword_count,
                )
            )
        return metrics
