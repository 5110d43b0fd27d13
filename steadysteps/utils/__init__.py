from .utils import (
    DATE_FORMAT,
    RECENT_WINDOW_DAYS,
    mean,
    parse_date,
    parse_datetime,
    recent_window,
    window_start,
)
