"""Models for validation findings and aggregate reports."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, computed_field

from frontcheck.models.enums import IssueKind


class Issue(BaseModel):
    """A single finding for one document.

    ``fixed`` is set when fix mode resolved the finding on disk.
    """

    kind: IssueKind
    message: str
    path: Path | None = None
    fixed: bool = False


class TitleCheck(BaseModel):
    """Result of checking the title of one document.

    Attributes:
        issues: Findings in detection order.
        replacement: Full replacement text when fix mode changed the document,
            otherwise ``None``.
    """

    issues: list[Issue] = Field(default_factory=list)
    replacement: str | None = None

    @property
    def kinds(self) -> list[IssueKind]:
        return [issue.kind for issue in self.issues]


class TitleReport(BaseModel):
    """Value returned by :func:`frontcheck.scan.run_title_check`."""

    documents_checked: int = 0
    issues: list[Issue] = Field(default_factory=list)
    fixed: int = 0

    @property
    def unresolved(self) -> list[Issue]:
        return [issue for issue in self.issues if not issue.fixed]

    @property
    def ok(self) -> bool:
        return not self.unresolved


class FieldMetrics(BaseModel):
    """Presence/quality metrics of the SEO-relevant fields of one block."""

    has_title: bool = False
    has_description: bool = False
    has_keywords: bool = False
    keyword_count: int = 0


class OptimizationCandidate(BaseModel):
    """A document whose metadata falls short of the reporting thresholds."""

    path: str
    missing_title: bool
    missing_description: bool
    low_keywords: bool
    keyword_count: int


class SeoSummary(BaseModel):
    """Aggregate field metrics over a content tree."""

    total: int = 0
    with_frontmatter: int = 0
    with_title: int = 0
    with_description: int = 0
    with_keywords: int = 0
    total_keywords: int = 0
    by_category: dict[str, int] = Field(default_factory=dict)
    needs_optimization: list[OptimizationCandidate] = Field(default_factory=list)

    def percent(self, count: int) -> int:
        if self.total == 0:
            return 0
        return round(count / self.total * 100)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def coverage(self) -> dict[str, int]:
        """Percentage of documents carrying each field."""
        return {
            "title": self.percent(self.with_title),
            "description": self.percent(self.with_description),
            "keywords": self.percent(self.with_keywords),
        }

    @computed_field  # type: ignore[prop-decorator]
    @property
    def average_keywords(self) -> float:
        if self.with_keywords == 0:
            return 0.0
        return round(self.total_keywords / self.with_keywords, 1)


class SeoReport(BaseModel):
    """Value returned by :func:`frontcheck.scan.run_seo_report`."""

    summary: SeoSummary = Field(default_factory=SeoSummary)
    failures: list[Issue] = Field(default_factory=list)
