"""Report configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

from runreport.formatters.common import default_report_name
from runreport.loader import LoadError, read_yaml_mapping


@dataclass
class ReportConfig:
    """Where reports go and what name they carry."""
    name: str = field(default_factory=default_report_name)
    nunit_path: Optional[str] = None
    junit_path: Optional[str] = None


def load_config(path: str | Path) -> ReportConfig:
    """Load a ReportConfig from a YAML file.

    Raises:
        LoadError: If the file is missing, invalid YAML, or has unknown or
            mistyped keys.
    """
    data = read_yaml_mapping(path, "Config")

    known = {f.name for f in fields(ReportConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise LoadError(
            f"Unknown config keys: {', '.join(unknown)}. "
            f"Valid keys: {', '.join(sorted(known))}"
        )
    for key, value in data.items():
        if value is not None and not isinstance(value, str):
            raise LoadError(f"Config '{key}' must be a string, got {type(value).__name__}")

    if data.get("name") is None:
        data.pop("name", None)
    return ReportConfig(**data)
