"""Human-readable summaries of a result list and of the active filters."""

from __future__ import annotations

from typing import Sized


def describe_results(results: Sized) -> str:
    count = len(results)
    return f"{count} book{'' if count == 1 else 's'} available"


def describe_active_filters(selected: Sized) -> str:
    """``"2 filters active"``, or an empty string when nothing is selected."""
    count = len(selected)
    if count == 0:
        return ""
    return f"{count} filter{'' if count == 1 else 's'} active"
