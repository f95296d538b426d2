"""Data models for documents, findings, and reports."""

from frontcheck.models.document import Document, FieldValue, MetadataBlock, MetadataField
from frontcheck.models.enums import IssueKind
from frontcheck.models.report import (
    FieldMetrics,
    Issue,
    OptimizationCandidate,
    SeoReport,
    SeoSummary,
    TitleCheck,
    TitleReport,
)

__all__ = [
    "Document",
    "FieldMetrics",
    "FieldValue",
    "Issue",
    "IssueKind",
    "MetadataBlock",
    "MetadataField",
    "OptimizationCandidate",
    "SeoReport",
    "SeoSummary",
    "TitleCheck",
    "TitleReport",
]
