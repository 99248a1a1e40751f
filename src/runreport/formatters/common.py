"""Helpers shared by the NUnit and JUnit formatters."""

from __future__ import annotations

import logging
import os
import sys
import xml.etree.ElementTree as ET
from datetime import timedelta
from pathlib import Path
from typing import List, Union

from runreport.models import TestEntry, TestRunSummary, result_order

logger = logging.getLogger(__name__)


def default_report_name() -> str:
    """Name of the entry script, used as the report/assembly name."""
    script = sys.argv[0] if sys.argv else ""
    return Path(script).stem or "runreport"


def format_seconds(duration: timedelta) -> str:
    """Seconds with exactly three decimals and a '.' separator."""
    return f"{duration.total_seconds():.3f}"


def ordered_tests(summary: TestRunSummary) -> List[TestEntry]:
    """All tests, highest result rank first, then longest duration first.

    The sort is stable, so ties keep the errored/failed/ignored/passed order.
    """
    return sorted(
        summary.all_tests(),
        key=lambda entry: (result_order(entry[1].result), entry[1].duration.total_seconds()),
        reverse=True,
    )


def save_xml(path: Union[str, Path], root: ET.Element) -> Path:
    """Write an XML document, creating parent directories as needed.

    Text is not checked for characters XML 1.0 forbids, so control
    characters in captured output are written as-is. An existing file is
    overwritten.
    """
    full_path = Path(os.path.abspath(path))
    full_path.parent.mkdir(parents=True, exist_ok=True)
    tree = ET.ElementTree(root)
    with open(full_path, "wb") as f:
        tree.write(f, encoding="utf-8", xml_declaration=True)
    logger.debug("Wrote %s report to %s", root.tag, full_path)
    return full_path
