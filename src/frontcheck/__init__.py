"""Public API surface for frontcheck."""

__version__ = "0.3.0"

from frontcheck.checks import (
    SeoAccumulator,
    check_document,
    field_metrics,
    fix_unquoted_colon,
    keyword_count,
    validate_title,
)
from frontcheck.config import FrontcheckConfig, load_config, resolve_config
from frontcheck.exceptions import (
    ConfigError,
    DocumentIOError,
    DocumentReadError,
    DocumentWriteError,
    FrontcheckError,
)
from frontcheck.frontmatter import has_frontmatter, is_quoted, parse_frontmatter, unquote
from frontcheck.models import (
    Document,
    FieldMetrics,
    Issue,
    IssueKind,
    MetadataBlock,
    MetadataField,
    SeoReport,
    SeoSummary,
    TitleCheck,
    TitleReport,
)
from frontcheck.scan import NullScanProgress, ScanProgress, discover_documents, run_seo_report, run_title_check

__all__ = [
    "ConfigError",
    "Document",
    "DocumentIOError",
    "DocumentReadError",
    "DocumentWriteError",
    "FieldMetrics",
    "FrontcheckConfig",
    "FrontcheckError",
    "Issue",
    "IssueKind",
    "MetadataBlock",
    "MetadataField",
    "NullScanProgress",
    "ScanProgress",
    "SeoAccumulator",
    "SeoReport",
    "SeoSummary",
    "TitleCheck",
    "TitleReport",
    "__version__",
    "check_document",
    "discover_documents",
    "field_metrics",
    "fix_unquoted_colon",
    "has_frontmatter",
    "is_quoted",
    "keyword_count",
    "load_config",
    "parse_frontmatter",
    "resolve_config",
    "run_seo_report",
    "run_title_check",
    "unquote",
    "validate_title",
]
