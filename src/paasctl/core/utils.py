"""Common utilities for paasctl."""

from datetime import datetime, timezone


def parse_time(time_str: str) -> datetime:
    """Parse an API timestamp to datetime.

    Supports:
    - ISO format: 2024-01-15T10:30:00Z
    - Date only: 2024-01-15

    Args:
        time_str: Time string

    Returns:
        datetime object (UTC when no offset is given)
    """
    try:
        if time_str.endswith("Z"):
            return datetime.fromisoformat(time_str[:-1] + "+00:00")
        parsed = datetime.fromisoformat(time_str)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    except ValueError:
        pass

    try:
        return datetime.strptime(time_str, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    except ValueError:
        raise ValueError(f"Invalid time format: {time_str}")


def format_timestamp(value: str | None) -> str:
    """Format an API timestamp as '2021-01-28 20:45:50 +0000 UTC'.

    Values that do not parse are returned unchanged.
    """
    if not value:
        return ""
    try:
        parsed = parse_time(value)
    except ValueError:
        return value
    return f"{parsed.strftime('%Y-%m-%d %H:%M:%S %z')} {parsed.tzname() or 'UTC'}"
