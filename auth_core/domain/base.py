from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what the DateTime columns round-trip."""
    return datetime.now(UTC).replace(tzinfo=None)
