"""Command-line interface for frontcheck."""

from __future__ import annotations

import logging as logging

from frontcheck import resolve_config as resolve_config
from frontcheck import run_seo_report as run_seo_report
from frontcheck import run_title_check as run_title_check
from frontcheck.cli.app import main as main
from frontcheck.cli.commands import seo as seo_command
from frontcheck.cli.commands import titles as titles_command
from frontcheck.cli.parser import build_parser as build_parser

_format_titles = titles_command.format_titles_report
_format_seo = seo_command.format_seo_summary

_run_titles = titles_command.run_titles
_run_seo = seo_command.run_seo

