"""Validation rules for sales report requests."""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Tuple

from solid_examples.domain.common.result import Result


def parse_report_date(raw: str, field_name: str) -> Result[datetime]:
    """Parse an ISO-8601 date or datetime. A bare date means midnight."""
    try:
        text = raw.strip()
        # fromisoformat only accepts a "Z" suffix from 3.11 on
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    except (AttributeError, ValueError):
        return Result.fail(f"'{field_name}' must be an ISO-8601 date, got '{raw}'.")
    # Sales are recorded as naive UTC timestamps
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return Result.ok(parsed)


def validate_date_range(start: datetime, end: datetime) -> Result[Tuple[datetime, datetime]]:
    if start > end:
        return Result.fail(
            f"Invalid range: start {start.isoformat()} is after end {end.isoformat()}."
        )
    return Result.ok((start, end))
