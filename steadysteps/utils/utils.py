from datetime import date, datetime, timedelta

RECENT_WINDOW_DAYS = 7
DATE_FORMAT = "%Y-%m-%d"


def parse_date(value):
    """Accepts a date, a datetime or a `YYYY-MM-DD` string."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_datetime(value):
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


def window_start(today: date, days: int = RECENT_WINDOW_DAYS) -> date:
    return today - timedelta(days=days)


def recent_window(checkins, today: date, days: int = RECENT_WINDOW_DAYS):
    """Check-ins dated within the trailing window, newest first."""
    start = window_start(today, days)
    recent = [c for c in checkins if start <= c.checkin_date <= today]
    return sorted(recent, key=lambda c: c.checkin_date, reverse=True)


def mean(values):
    values = list(values)
    if not values:
        return None
    return sum(values) / len(values)
