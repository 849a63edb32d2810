# taskboard/utils/dates.py
from datetime import date, datetime, timedelta, timezone


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching the stored timestamps"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def start_of_day(day: date) -> datetime:
    return datetime(day.year, day.month, day.day)


def start_of_week(now: datetime) -> datetime:
    """Monday 00:00 of the week containing ``now``"""
    monday = now.date() - timedelta(days=now.weekday())
    return start_of_day(monday)


def start_of_month(now: datetime) -> datetime:
    return datetime(now.year, now.month, 1)


def hours_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 3600
