from datetime import datetime, timedelta, timezone


def ensure_utc(dt: datetime) -> datetime:
    """
    Ensures a datetime object is timezone-aware and in UTC.
    If input is naive, it assumes UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def human_duration(delta: timedelta) -> str:
    """
    Returns a short human-readable duration, following the rules kubectl
    uses for its AGE columns (e.g. '45s', '3m20s', '5h12m', '3d4h', '2y30d').

    Up to two seconds in the future is tolerated as clock skew and reported
    as '0s'; anything further ahead is '<invalid>'.
    """
    seconds = int(delta.total_seconds())
    if seconds < -1:
        return "<invalid>"
    if seconds < 0:
        return "0s"
    if seconds < 60 * 2:
        return f"{seconds}s"

    minutes = seconds // 60
    if minutes < 10:
        s = seconds % 60
        if s == 0:
            return f"{minutes}m"
        return f"{minutes}m{s}s"
    if minutes < 60 * 3:
        return f"{minutes}m"

    hours = minutes // 60
    if hours < 8:
        m = minutes % 60
        if m == 0:
            return f"{hours}h"
        return f"{hours}h{m}m"
    if hours < 48:
        return f"{hours}h"
    if hours < 24 * 8:
        h = hours % 24
        if h == 0:
            return f"{hours // 24}d"
        return f"{hours // 24}d{h}h"
    if hours < 24 * 365 * 2:
        return f"{hours // 24}d"
    if hours < 24 * 365 * 8:
        days = (hours // 24) % 365
        if days == 0:
            return f"{hours // 24 // 365}y"
        return f"{hours // 24 // 365}y{days}d"
    return f"{hours // 24 // 365}y"


def age(created: datetime | None, now: datetime) -> str:
    """Age of an object created at `created`, '<unknown>' when unset."""
    if created is None:
        return "<unknown>"
    return human_duration(ensure_utc(now) - ensure_utc(created))
