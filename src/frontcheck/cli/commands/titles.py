"""Titles command execution and formatting."""

from __future__ import annotations

import argparse

from frontcheck.cli.common import collect_documents, content_root, display_path, plural
from frontcheck.cli.progress.rich import RichScanProgress
from frontcheck.models.report import TitleReport


def format_titles_report(report: TitleReport) -> str:
    lines: list[str] = []
    if report.issues:
        lines.append(f"Found {plural(len(report.issues), 'issue')}:")
        lines.append("")
        for issue in report.issues:
            suffix = " (fixed)" if issue.fixed else ""
            lines.append(f"- [{issue.kind}] {display_path(issue.path)} -> {issue.message}{suffix}")
        if report.fixed:
            lines.append("")
            lines.append(f"Quoted {plural(report.fixed, 'title')} containing an unquoted colon.")
        if report.ok:
            lines.append("")
            lines.append("No unresolved issues remain.")
    else:
        lines.append(f"All {plural(report.documents_checked, 'document')} passed the title check.")
    return "\n".join(lines)


def run_titles(args: argparse.Namespace) -> TitleReport:
    import frontcheck.cli as cli

    config = cli.resolve_config(args.config)
    paths = collect_documents(content_root(args, config), config)

    if not args.verbose:
        with RichScanProgress() as progress:
            report = cli.run_title_check(paths, config=config, fix=args.fix, progress=progress)
    else:
        report = cli.run_title_check(paths, config=config, fix=args.fix)

    print(cli._format_titles(report))
    return report


__all__ = ["format_titles_report", "run_titles"]
