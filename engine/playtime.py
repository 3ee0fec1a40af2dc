"""Daily rollover cutoff and duration formatting for the activity summary."""
from datetime import datetime, timedelta

from config.settings import ROLLOVER_HOUR


def rollover_cutoff(now=None, hour=ROLLOVER_HOUR):
    """Epoch seconds of the most recent local rollover at or before `now`.

    With the default 4 AM rollover, 02:00 still counts toward yesterday.
    """
    current = datetime.fromtimestamp(now) if now is not None else datetime.now()
    cutoff = current.replace(hour=hour, minute=0, second=0, microsecond=0)
    if current < cutoff:
        cutoff -= timedelta(days=1)
    return cutoff.timestamp()


def format_seconds(seconds):
    """'1h 05m', '12m 30s', '45s'."""
    total = int(round(seconds or 0))
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    if hours:
        return f"{hours}h {minutes:02d}m"
    if minutes:
        return f"{minutes}m {secs:02d}s"
    return f"{secs}s"
