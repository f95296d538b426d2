"""Document discovery and batch runners."""

from frontcheck.scan.discovery import discover_documents
from frontcheck.scan.progress import NullScanProgress, ScanProgress
from frontcheck.scan.runner import run_seo_report, run_title_check

__all__ = ["NullScanProgress", "ScanProgress", "discover_documents", "run_seo_report", "run_title_check"]
