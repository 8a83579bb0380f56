"""Timestamp parsing with the legacy 5-hour correction.

Worker ``updatedAt`` and transaction ``createdAt`` values come back 5 hours
ahead of the real instant. Only those two fields get LEGACY_OFFSET
subtracted; hashrate and score history timestamps are taken as-is.
"""

from datetime import datetime, timedelta, timezone

from luxor.exceptions import InvalidTimestamp

LEGACY_OFFSET = timedelta(hours=5)


def parse_timestamp(raw: str) -> datetime:
    """Parse an ISO-8601 string into an aware UTC datetime.

    Accepts a trailing ``Z``, explicit offsets, and bare dates. Values without
    an offset are taken as UTC.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidTimestamp(f"Unparseable timestamp: {raw!r}")

    text = raw.strip()
    if text[-1] in "zZ":
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise InvalidTimestamp(f"Unparseable timestamp: {raw!r}") from e

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def normalize_timestamp(raw: str, apply_legacy_offset: bool) -> datetime:
    """Parse ``raw`` and, when asked, shift it back by LEGACY_OFFSET.

    Raises:
        InvalidTimestamp: If ``raw`` is not a parseable timestamp string.
    """
    instant = parse_timestamp(raw)
    if apply_legacy_offset:
        return instant - LEGACY_OFFSET
    return instant
