"""Batch processing of a document set.

Each document is read, checked, and (in fix mode) written back before the next
one is touched. A document that cannot be read or written is recorded as an
issue and the batch carries on.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from frontcheck.checks.seo import SeoAccumulator
from frontcheck.checks.title import check_document
from frontcheck.exceptions import DocumentReadError, DocumentWriteError
from frontcheck.frontmatter.parser import parse_frontmatter
from frontcheck.models.document import Document
from frontcheck.models.enums import IssueKind
from frontcheck.models.report import Issue, SeoReport, TitleReport
from frontcheck.persistence import write_document
from frontcheck.scan.progress import NullScanProgress, ScanProgress

if TYPE_CHECKING:
    from frontcheck.config import FrontcheckConfig

logger = logging.getLogger(__name__)


def _read(path: Path) -> Document | Issue:
    try:
        return Document.from_path(path)
    except DocumentReadError as exc:
        logger.warning("skipping %s: %s", path, exc.reason)
        return Issue(kind=IssueKind.UNREADABLE_FILE, message=exc.reason, path=path)


def run_title_check(
    paths: Sequence[Path],
    *,
    config: FrontcheckConfig,
    fix: bool = False,
    progress: ScanProgress | None = None,
) -> TitleReport:
    """Check the title of every document in *paths*.

    In fix mode, documents whose only fixable finding is an unquoted colon are
    rewritten in place and the finding is marked as fixed.
    """
    progress = progress or NullScanProgress()
    phase = "Fix" if fix else "Check"
    report = TitleReport()

    progress.phase_start(phase, total=len(paths))
    try:
        for path in paths:
            loaded = _read(path)
            if isinstance(loaded, Issue):
                report.issues.append(loaded)
                progress.item_done(phase)
                continue

            report.documents_checked += 1
            result = check_document(loaded, fix=fix, exempt_layouts=config.exempt_layouts)
            issues = result.issues
            if result.replacement is not None:
                try:
                    write_document(path, result.replacement)
                except DocumentWriteError as exc:
                    logger.warning("could not write fix for %s: %s", path, exc.reason)
                    issues = [issue.model_copy(update={"fixed": False}) for issue in issues]
                    issues.append(Issue(kind=IssueKind.WRITE_FAILURE, message=exc.reason, path=path))
                else:
                    logger.debug("quoted title in %s", path)
                    report.fixed += 1

            report.issues.extend(issues)
            progress.item_done(phase)
        progress.phase_done(phase)
    except BaseException as exc:
        progress.phase_error(phase, exc)
        raise
    return report


def run_seo_report(
    paths: Sequence[Path],
    *,
    root: Path,
    config: FrontcheckConfig,
    min_keywords: int | None = None,
    progress: ScanProgress | None = None,
) -> SeoReport:
    """Aggregate field metrics for *paths*, skipping the configured file names.

    Paths are categorised relative to *root*.
    """
    progress = progress or NullScanProgress()
    phase = "Report"
    skipped = set(config.seo_skip_files)
    accumulator = SeoAccumulator(min_keywords=config.min_keywords if min_keywords is None else min_keywords)
    failures: list[Issue] = []

    selected = [path for path in paths if path.name not in skipped]
    progress.phase_start(phase, total=len(selected))
    try:
        for path in selected:
            loaded = _read(path)
            if isinstance(loaded, Issue):
                failures.append(loaded)
            else:
                accumulator.add(_relative_to(path, root), parse_frontmatter(loaded))
            progress.item_done(phase)
        progress.phase_done(phase)
    except BaseException as exc:
        progress.phase_error(phase, exc)
        raise
    return SeoReport(summary=accumulator.summary, failures=failures)


def _relative_to(path: Path, root: Path) -> Path:
    try:
        return path.relative_to(root)
    except ValueError:
        return Path(path.name)
