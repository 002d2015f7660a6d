import datetime as dt
from typing import Optional


def utcnow() -> dt.datetime:
    # Stored timestamps are naive UTC (see the DateTime columns on the models)
    return dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)


def normalize_dt(value: Optional[dt.datetime]) -> dt.datetime:
    """Converts to a naive UTC datetime; None means now."""
    if value is None:
        return utcnow()
    # Aware values are converted to UTC; naive ones are assumed to be UTC already
    return value.astimezone(dt.timezone.utc).replace(tzinfo=None) if value.tzinfo else value
