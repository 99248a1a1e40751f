"""JUnit XML output formatter.

JUnit has no official XML schema. This is the minimal shape CI ingesters
such as GitLab need to show pass/fail/skip per test case.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

from runreport.formatters.common import (
    default_report_name,
    format_seconds,
    ordered_tests,
    save_xml,
)
from runreport.models import Error, Failed, Ignored, Passed, TestRunSummary


def build_junit(summary: TestRunSummary, name: str) -> ET.Element:
    """Build the ``testsuites`` tree for a run."""
    testsuites = ET.Element("testsuites")
    testsuite = ET.SubElement(testsuites, "testsuite", {"name": name})

    for flat_test, test in ordered_tests(summary):
        testcase = ET.SubElement(testsuite, "testcase", {
            "name": flat_test.name,
            "time": format_seconds(test.duration),
        })
        result = test.result
        if isinstance(result, Passed):
            continue
        if isinstance(result, Error):
            error = ET.SubElement(testcase, "error", {"message": result.message})
            error.text = result.details
        elif isinstance(result, Failed):
            ET.SubElement(testcase, "failure", {"message": result.message})
        elif isinstance(result, Ignored):
            ET.SubElement(testcase, "skipped", {"message": result.message})
        else:
            raise TypeError(f"Unknown test result: {result!r}")

    ET.indent(testsuites)
    return testsuites


def write_junit_summary(
    path: Union[str, Path],
    summary: TestRunSummary,
    name: Optional[str] = None,
) -> Path:
    """Write a JUnit report for ``summary`` to ``path``."""
    return save_xml(path, build_junit(summary, name or default_report_name()))
