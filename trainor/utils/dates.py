import re
from datetime import date, datetime, timezone

COLON_TIME = re.compile(r"(\d+):(\d+)")
UNIT_TIME = re.compile(r"(?:(\d+)m\s*)?(?:(\d+)s?)?")


def dt_to_iso(dt: datetime) -> str:
    """
    Convert a datetime to canonical ISO8601.
    Always returns a UTC Z-suffixed string.
    """
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def date_to_iso(d: date) -> str:
    """
    Convert a date object (YYYY-MM-DD) to ISO8601 string.
    """
    return d.isoformat()


def iso_to_dt(d: str) -> datetime:
    """
    Convert an ISO8601 string to a datetime object.
    """
    return datetime.fromisoformat(d.replace("Z", "+00:00"))


def now() -> datetime:
    return datetime.now(timezone.utc)


def format_duration(seconds: int) -> str:
    if seconds <= 0:
        return "0s"

    minutes, secs = divmod(seconds, 60)
    if minutes:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def _to_int(group: str | None) -> int:
    return int(group) if group else 0


def parse_time_input(value: str) -> int:
    """
    Convert a time string to seconds.

    Accepts "1:30" (minutes:seconds), "1m 30s", "90s" and bare "90".
    The colon form wins when both could match. A component that does not
    match counts as zero, so malformed input such as "abc" parses to 0.
    """
    colon = COLON_TIME.search(value)
    if colon:
        return _to_int(colon.group(1)) * 60 + _to_int(colon.group(2))

    # anchored at the start, like a non-global JS match
    units = UNIT_TIME.match(value)
    if not units:  # pragma: no cover
        return 0
    return _to_int(units.group(1)) * 60 + _to_int(units.group(2))
