"""CLI entry point for runreport."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from runreport import __version__
from runreport.config import ReportConfig, load_config
from runreport.formatters.junit import write_junit_summary
from runreport.formatters.nunit import write_nunit_summary
from runreport.loader import LoadError, load_summary


@click.group()
@click.version_option(version=__version__, prog_name="runreport")
def cli() -> None:
    """runreport: NUnit v2 and JUnit XML reports for test runs."""


@cli.command()
@click.option("--summary", required=True, type=click.Path(exists=True), help="Path to the recorded run summary (YAML or JSON).")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True), help="Path to a YAML report config.")
@click.option("--nunit", "nunit_path", default=None, help="Write an NUnit v2 report to this path.")
@click.option("--junit", "junit_path", default=None, help="Write a JUnit report to this path.")
@click.option("--name", default=None, help="Report/assembly name. Defaults to the config value or the entry script name.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def write(
    summary: str,
    config_path: Optional[str],
    nunit_path: Optional[str],
    junit_path: Optional[str],
    name: Optional[str],
    verbose: bool,
) -> None:
    """Write XML reports for a completed run."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(config_path) if config_path else ReportConfig()
    except LoadError as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(1)

    nunit_path = nunit_path or config.nunit_path
    junit_path = junit_path or config.junit_path
    name = name or config.name
    if not nunit_path and not junit_path:
        click.echo("Error: No report requested. Use --nunit and/or --junit.", err=True)
        sys.exit(1)

    try:
        run_summary = load_summary(summary)
    except LoadError as e:
        click.echo(f"Error loading summary: {e}", err=True)
        sys.exit(1)

    try:
        if nunit_path:
            written = write_nunit_summary(nunit_path, run_summary, name=name)
            click.echo(f"Wrote NUnit report to {written}")
        if junit_path:
            written = write_junit_summary(junit_path, run_summary, name=name)
            click.echo(f"Wrote JUnit report to {written}")
    except OSError as e:
        click.echo(f"Error writing report: {e}", err=True)
        sys.exit(1)

    click.echo(
        f"Total: {run_summary.total}  Passed: {len(run_summary.passed)}  "
        f"Failed: {len(run_summary.failed)}  Errored: {len(run_summary.errored)}  "
        f"Ignored: {len(run_summary.ignored)}"
    )
