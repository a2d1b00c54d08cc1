from datetime import datetime, timezone


def get_current_datetime() -> datetime:
    """Return current UTC datetime with timezone info."""
    dt = datetime.now(timezone.utc)
    # Ensure microseconds are stripped for consistency in tests
    return dt.replace(microsecond=0)


def get_current_date_string() -> str:
    """Return today's UTC date formatted as YYYY-MM-DD."""
    return get_current_datetime().date().isoformat()
