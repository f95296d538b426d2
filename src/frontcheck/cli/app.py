"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from frontcheck import ConfigError


def main(argv: list[str] | None = None) -> int:
    import frontcheck.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "titles":
            report = cli._run_titles(args)
            return 0 if report.ok else 1
        if args.command == "seo":
            seo_report = cli._run_seo(args)
            if seo_report.failures:
                return 1
            if args.strict and seo_report.summary.needs_optimization:
                return 1
            return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"error: unsupported command: {args.command}", file=sys.stderr)
    return 2


__all__ = ["main"]
