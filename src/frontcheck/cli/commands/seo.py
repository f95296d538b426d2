"""SEO report command execution and formatting."""

from __future__ import annotations

import argparse
import sys

from frontcheck.cli.common import collect_documents, content_root, display_path, plural
from frontcheck.cli.progress.rich import RichScanProgress
from frontcheck.models.report import OptimizationCandidate, SeoReport, SeoSummary

LISTED_CANDIDATES = 20


def _candidate_problems(candidate: OptimizationCandidate, min_keywords: int) -> str:
    problems: list[str] = []
    if candidate.missing_title:
        problems.append("missing title")
    if candidate.missing_description:
        problems.append("missing description")
    if candidate.low_keywords:
        problems.append(f"keywords {candidate.keyword_count}/{min_keywords}")
    return ", ".join(problems)


def format_seo_summary(summary: SeoSummary, *, min_keywords: int) -> str:
    lines = [
        "",
        "frontcheck - SEO field coverage",
        "",
        f"  Documents:     {summary.total} ({summary.with_frontmatter} with front matter)",
        f"  Title:         {summary.with_title} ({summary.percent(summary.with_title)}%)",
        f"  Description:   {summary.with_description} ({summary.percent(summary.with_description)}%)",
        f"  Keywords:      {summary.with_keywords} ({summary.percent(summary.with_keywords)}%)",
        f"  Total keywords: {summary.total_keywords} (avg {summary.average_keywords} per document)",
    ]

    if summary.by_category:
        lines.append("")
        lines.append("  Categories:")
        for category, count in sorted(summary.by_category.items(), key=lambda item: (-item[1], item[0])):
            lines.append(f"    {category}: {count}")

    lines.append("")
    lines.append(f"  Needs optimization: {plural(len(summary.needs_optimization), 'document')}")
    for index, candidate in enumerate(summary.needs_optimization[:LISTED_CANDIDATES], start=1):
        lines.append(f"    {index}. {candidate.path} ({_candidate_problems(candidate, min_keywords)})")
    hidden = len(summary.needs_optimization) - LISTED_CANDIDATES
    if hidden > 0:
        lines.append(f"    ... and {hidden} more")

    lines.append("")
    return "\n".join(lines)


def run_seo(args: argparse.Namespace) -> SeoReport:
    import frontcheck.cli as cli

    config = cli.resolve_config(args.config)
    root = content_root(args, config)
    paths = collect_documents(root, config)
    min_keywords = config.min_keywords if args.min_keywords is None else args.min_keywords

    if not args.verbose and not args.json:
        with RichScanProgress() as progress:
            report = cli.run_seo_report(paths, root=root, config=config, min_keywords=min_keywords, progress=progress)
    else:
        report = cli.run_seo_report(paths, root=root, config=config, min_keywords=min_keywords)

    for failure in report.failures:
        print(f"warning: [{failure.kind}] {display_path(failure.path)} -> {failure.message}", file=sys.stderr)

    if args.json:
        print(report.summary.model_dump_json(indent=2))
    else:
        print(cli._format_seo(report.summary, min_keywords=min_keywords))
    return report


__all__ = ["format_seo_summary", "run_seo"]
