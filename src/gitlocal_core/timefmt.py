"""RFC 3339 rendering of git signature times."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

# datetime.timezone rejects offsets of a full day or more
_MAX_OFFSET_MINUTES = 24 * 60 - 1


def format_rfc3339(epoch_seconds: int, offset_minutes: int) -> str:
    """Render a git signature time in its own UTC offset.

    Matches the common RFC 3339 profile: second precision, ``Z`` for a zero
    offset, ``+HH:MM``/``-HH:MM`` otherwise. Offsets outside what a real
    timezone can express are rendered in UTC.
    """
    if abs(offset_minutes) > _MAX_OFFSET_MINUTES:
        offset_minutes = 0
    tz = timezone(timedelta(minutes=offset_minutes))
    stamp = datetime.fromtimestamp(epoch_seconds, tz=tz).isoformat(timespec="seconds")
    if offset_minutes == 0:
        return stamp[: -len("+00:00")] + "Z"
    return stamp
