"""YAML loader for recorded run summaries."""

from __future__ import annotations

import math
from datetime import timedelta
from pathlib import Path
from typing import Any, List, Optional

import yaml

from runreport.models import (
    Error,
    Failed,
    FlatTest,
    Ignored,
    Passed,
    TestEntry,
    TestResult,
    TestRunSummary,
    TestSummary,
)

VALID_RESULTS = {"passed", "failed", "error", "ignored"}


class LoadError(Exception):
    """Raised when a summary or config file cannot be loaded or is invalid."""


class RecordedError(Exception):
    """An exception captured by another process, known only by its message.

    ``type_name`` is the name of the original exception type.
    """

    def __init__(self, message: str, type_name: str = "Exception") -> None:
        super().__init__(message)
        self.type_name = type_name


def read_yaml_mapping(path: str | Path, kind: str) -> dict:
    """Read a YAML file that must contain a mapping."""
    filepath = Path(path)
    if not filepath.exists():
        raise LoadError(f"{kind} file not found: {path}")

    try:
        with open(filepath, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LoadError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise LoadError(f"{kind} file must contain a YAML mapping, got {type(data).__name__}")
    return data


def _seconds(value: Any, where: str) -> timedelta:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LoadError(f"{where}: 'duration' must be a number of seconds, got {value!r}")
    if not math.isfinite(value):
        raise LoadError(f"{where}: 'duration' must be finite, got {value}")
    if value < 0:
        raise LoadError(f"{where}: 'duration' must not be negative, got {value}")
    try:
        return timedelta(seconds=value)
    except (OverflowError, ValueError) as e:
        raise LoadError(f"{where}: 'duration' is out of range: {value}") from e


def _result(data: dict, where: str) -> TestResult:
    kind = data.get("result")
    if kind not in VALID_RESULTS:
        raise LoadError(
            f"{where} has invalid result {kind!r}. "
            f"Valid results: {', '.join(sorted(VALID_RESULTS))}"
        )
    if kind == "passed":
        return Passed()

    message = data.get("message", "")
    if not isinstance(message, str):
        raise LoadError(f"{where}: 'message' must be a string")
    if kind == "failed":
        return Failed(message)
    if kind == "ignored":
        return Ignored(message)

    trace: Optional[str] = data.get("trace")
    if trace is not None and not isinstance(trace, str):
        raise LoadError(f"{where}: 'trace' must be a string")
    type_name = data.get("type", "Exception")
    if not isinstance(type_name, str) or not type_name:
        raise LoadError(f"{where}: 'type' must be a non-empty string")
    if trace is None:
        trace = f"{type_name}: {message}" if message else type_name
    return Error(RecordedError(message, type_name), trace)


def load_summary(path: str | Path) -> TestRunSummary:
    """Load a TestRunSummary from a YAML (or JSON) file.

    Args:
        path: Path to the summary file.

    Returns:
        The run summary, with tests partitioned by result kind.

    Raises:
        LoadError: If the file is missing, invalid YAML, or fails validation.
    """
    data = read_yaml_mapping(path, "Summary")

    if "tests" not in data:
        raise LoadError("Summary missing required field: 'tests'")
    if not isinstance(data["tests"], list):
        raise LoadError("Summary 'tests' must be a list")

    entries: List[TestEntry] = []
    for i, test_data in enumerate(data["tests"]):
        if not isinstance(test_data, dict):
            raise LoadError(f"Test {i} must be a mapping")
        if "name" not in test_data:
            raise LoadError(f"Test {i} missing required field: 'name'")
        if not isinstance(test_data["name"], str):
            raise LoadError(
                f"Test {i}: 'name' must be a string, got {type(test_data['name']).__name__}"
            )

        where = f"Test '{test_data['name']}'"
        entries.append((
            FlatTest(test_data["name"]),
            TestSummary(
                result=_result(test_data, where),
                duration=_seconds(test_data.get("duration", 0), where),
            ),
        ))

    return TestRunSummary.from_results(
        entries, duration=_seconds(data.get("duration", 0), "Summary"),
    )
