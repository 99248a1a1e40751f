"""NUnit v2 (TestResult.xml) output formatter.

Follows the legacy v2 layout: http://nunit.org/docs/files/TestResult.xml
The v3 format is a different schema and is not produced here.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from runreport.environment import EnvironmentInfo, current_environment
from runreport.formatters.common import (
    default_report_name,
    format_seconds,
    ordered_tests,
    save_xml,
)
from runreport.models import Error, Failed, FlatTest, Ignored, Passed, TestRunSummary, TestSummary


def _message(parent: ET.Element, tag: str, text: str) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = text
    return element


def _test_case(parent: ET.Element, flat_test: FlatTest, test: TestSummary) -> ET.Element:
    case = ET.SubElement(parent, "test-case", {"name": flat_test.name})
    result = test.result

    if isinstance(result, Ignored):
        case.set("executed", "False")
        case.set("result", "Ignored")
        reason = ET.SubElement(case, "reason")
        _message(reason, "message", result.message)
        return case

    if isinstance(result, Passed):
        outcome, success = "Success", "True"
    elif isinstance(result, (Error, Failed)):
        outcome, success = "Failure", "False"
    else:
        raise TypeError(f"Unknown test result: {result!r}")

    case.set("executed", "True")
    case.set("result", outcome)
    case.set("success", success)
    case.set("time", format_seconds(test.duration))
    case.set("asserts", "0")

    if isinstance(result, Error):
        failure = ET.SubElement(case, "failure")
        _message(failure, "message", result.message)
        _message(failure, "stack-trace", result.details)
    elif isinstance(result, Failed):
        failure = ET.SubElement(case, "failure")
        _message(failure, "message", result.message)
    return case


def build_nunit(
    summary: TestRunSummary,
    name: str,
    environment: EnvironmentInfo,
    now: datetime,
) -> ET.Element:
    """Build the ``test-results`` tree for a run without touching the filesystem."""
    root = ET.Element("test-results", {
        "date": now.strftime("%Y-%m-%d"),
        "name": name,
        "total": str(summary.total),
        "errors": str(len(summary.errored)),
        "failures": str(len(summary.failed)),
        "ignored": str(len(summary.ignored)),
        "not-run": "0",
        "inconclusive": "0",
        "skipped": "0",
        "invalid": "0",
        "time": now.strftime("%H:%M:%S"),
    })
    ET.SubElement(root, "environment", {
        "runreport-version": environment.tool_version,
        "clr-version": environment.runtime_version,
        "os-version": environment.os_version,
        "platform": environment.platform,
        "cwd": environment.cwd,
        "machine-name": environment.machine_name,
        "user": environment.user,
        "user-domain": environment.user_domain,
    })
    ET.SubElement(root, "culture-info", {
        "current-culture": environment.current_culture,
        "current-uiculture": environment.current_uiculture,
    })

    suite = ET.SubElement(root, "test-suite", {
        "type": "Assembly",
        "name": name,
        "executed": "True",
        "result": "Success" if summary.successful else "Failure",
        "success": "True" if summary.successful else "False",
        "time": format_seconds(summary.duration),
        "asserts": "0",
    })
    results = ET.SubElement(suite, "results")
    for flat_test, test in ordered_tests(summary):
        _test_case(results, flat_test, test)

    ET.indent(root)
    return root


def write_nunit_summary(
    path: Union[str, Path],
    summary: TestRunSummary,
    name: Optional[str] = None,
    environment: Optional[EnvironmentInfo] = None,
    now: Optional[datetime] = None,
) -> Path:
    """Write an NUnit v2 report for ``summary`` to ``path``.

    Ambient values that are not passed in are read from the running process.
    Returns the absolute path written.
    """
    root = build_nunit(
        summary,
        name=name or default_report_name(),
        environment=environment or current_environment(),
        now=now or datetime.now(),
    )
    return save_xml(path, root)
