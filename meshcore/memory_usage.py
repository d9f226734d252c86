"""Resident memory of the running process."""

from __future__ import annotations

import logging
import os
import sys

try:
    import resource
except ImportError:  # not available on Windows
    resource = None

_log = logging.getLogger(__name__)

_STATM_PATH = "/proc/self/statm"


def _is_linux() -> bool:
    return sys.platform.startswith("linux")


def max_size() -> int:
    """Peak resident set size in bytes, or 0 where it cannot be determined."""
    if resource is None or not (_is_linux() or sys.platform == "darwin"):
        return 0
    maxrss = int(resource.getrusage(resource.RUSAGE_SELF).ru_maxrss)
    if sys.platform == "darwin":
        return maxrss
    return maxrss * 1024


def current_size() -> int:
    """Current resident set size in bytes, or 0 where it cannot be determined."""
    if not _is_linux():
        return 0
    try:
        with open(_STATM_PATH) as fp:
            fields = fp.read().split()
    except OSError:
        _log.error("Failed to read process information file")
        return 0
    try:
        rss = int(fields[1])
    except (IndexError, ValueError):
        _log.error("Failed to retrieve RSS information")
        return 0
    return rss * int(os.sysconf("SC_PAGE_SIZE"))