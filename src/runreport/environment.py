"""Ambient process and host information recorded in NUnit reports."""

from __future__ import annotations

import getpass
import locale
import os
import platform
import socket
from dataclasses import dataclass
from typing import Optional

from runreport import __version__


@dataclass(frozen=True)
class EnvironmentInfo:
    """Read-only snapshot of the values the NUnit ``environment`` and
    ``culture-info`` elements report."""
    tool_version: str
    runtime_version: str
    os_version: str
    platform: str
    cwd: str
    machine_name: str
    user: str
    user_domain: str
    current_culture: str
    current_uiculture: str


def _user_name() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        # No passwd entry and no LOGNAME/USER variables (e.g. bare containers).
        return ""


def _culture_name(category: Optional[int]) -> str:
    """Return a locale as a culture name like ``en-US``; empty when unset."""
    if category is None:
        return ""
    try:
        language, _encoding = locale.getlocale(category)
    except ValueError:
        return ""
    if not language or language in ("C", "POSIX"):
        return ""
    return language.replace("_", "-")


def current_environment() -> EnvironmentInfo:
    """Read the current process environment."""
    machine_name = socket.gethostname()
    return EnvironmentInfo(
        tool_version=__version__,
        runtime_version=platform.python_version(),
        os_version=platform.platform(),
        platform=platform.system(),
        cwd=os.getcwd(),
        machine_name=machine_name,
        user=_user_name(),
        user_domain=os.environ.get("USERDOMAIN", machine_name),
        current_culture=_culture_name(locale.LC_CTYPE),
        current_uiculture=_culture_name(getattr(locale, "LC_MESSAGES", None)),
    )
