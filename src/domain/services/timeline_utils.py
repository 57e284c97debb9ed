"""
Timeline Utilities - Date formatting, durations and estimates for timelines.

Every helper that depends on the current time takes an explicit ``now``;
when omitted it defaults to the current UTC time. Unparseable dates never
raise: they degrade to the sentinel strings below.
"""

import math
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, Literal, Optional, Union

from src.domain.value_objects.application_status import ApplicationStatus
from src.domain.value_objects.timeline import (
    StepIcon,
    StepProgress,
    TimeEstimate,
    TimelineDuration,
    TimelineStep,
)


INVALID_DATE = "Invalid date"
UNKNOWN_DURATION = "Unknown"

MINUTES_IN_DAY = 1440
MINUTES_IN_ALMOST_TWO_DAYS = 2520
MINUTES_IN_MONTH = 43200
MINUTES_IN_TWO_MONTHS = 86400

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_ISO_TAIL = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(?::\d{2})?)"
    r"(?:[.,](?P<fraction>\d+))?"
    r"(?P<offset>[+-]\d{2}(?::?\d{2})?)?$"
)

TimestampFormat = Literal["relative", "absolute", "both", "smart"]
DateLike = Union[str, datetime, None]


@dataclass(frozen=True)
class _Estimate:
    days: int
    message: str


ESTIMATES: dict[ApplicationStatus, _Estimate] = {
    ApplicationStatus.PENDING: _Estimate(
        3, "Applications are typically reviewed within 2-3 business days"),
    ApplicationStatus.REVIEWING: _Estimate(
        5, "Review process usually takes 3-5 business days"),
    ApplicationStatus.SHORTLISTED: _Estimate(
        7, "Next steps are usually communicated within a week"),
    ApplicationStatus.ACCEPTED: _Estimate(
        0, "Congratulations! Check your email for next steps"),
    ApplicationStatus.REJECTED: _Estimate(
        0, "Thank you for your interest. Consider applying to other positions"),
}


def round_half_up(value: float) -> int:
    """Round halves up, the way percentages are shown."""
    return int(math.floor(value + 0.5))


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def _normalize_iso(text: str) -> str:
    """Pad fractional seconds to 6 digits and write offsets as ``+HH:MM``."""
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    match = _ISO_TAIL.match(text)
    if match is None:
        return text

    normalized = match.group("base")
    fraction = match.group("fraction")
    if fraction:
        normalized += "." + (fraction + "000000")[:6]
    offset = match.group("offset")
    if offset:
        digits = offset[1:].replace(":", "")
        normalized += f"{offset[0]}{digits[:2]}:{digits[2:4] or '00'}"
    return normalized


def parse_timestamp(value: DateLike) -> Optional[datetime]:
    """
    Parse an ISO-8601 string (or pass through a datetime).

    Naive values are taken as UTC and a trailing ``Z`` is accepted.
    Fractional seconds of any length and ``+HHMM`` / ``+HH`` offsets, as
    emitted by Postgres ``timestamptz`` columns, are accepted as well.

    Returns:
        Aware datetime, or None if the value cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = _normalize_iso(value.strip())
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def elapsed_days(since: DateLike, now: Optional[datetime] = None) -> Optional[int]:
    """Whole days from ``since`` until ``now`` (never negative); None if unparseable."""
    start = parse_timestamp(since)
    if start is None:
        return None
    end = parse_timestamp(now) if now is not None else utc_now()
    return max(0, (end - start) // timedelta(days=1))


def format_timeline_timestamp(
    value: DateLike,
    fmt: TimestampFormat = "relative",
    now: Optional[datetime] = None,
    smart_threshold_days: int = 7,
) -> str:
    """
    Render a timestamp for display.

    Args:
        value: ISO string or datetime
        fmt: "relative" ("3 days ago"), "absolute" ("Jan 5, 2024"),
            "both" ("3 days ago (Jan 5)") or "smart" (relative while
            younger than ``smart_threshold_days``, absolute afterwards)
        now: Reference time for relative output
        smart_threshold_days: Age at which "smart" switches to absolute

    Returns:
        Formatted text, or "Invalid date".
    """
    moment = parse_timestamp(value)
    if moment is None:
        return INVALID_DATE

    reference = parse_timestamp(now) if now is not None else utc_now()

    if fmt == "absolute":
        return format_absolute(moment)
    if fmt == "both":
        return f"{format_relative(moment, reference)} ({MONTH_ABBR[moment.month - 1]} {moment.day})"
    if fmt == "smart":
        if reference - moment < timedelta(days=smart_threshold_days):
            return format_relative(moment, reference)
        return format_absolute(moment)
    return format_relative(moment, reference)


def format_absolute(moment: datetime) -> str:
    """Format as "Jan 5, 2024"."""
    return f"{MONTH_ABBR[moment.month - 1]} {moment.day}, {moment.year}"


def format_relative(moment: datetime, now: datetime) -> str:
    """Format the distance between two times with an "ago"/"in" suffix."""
    distance = _format_distance(moment, now)
    if moment > now:
        return f"in {distance}"
    return f"{distance} ago"


def _format_distance(first: datetime, second: datetime) -> str:
    earlier, later = sorted((first, second))
    seconds = int((later - earlier).total_seconds())
    minutes = round_half_up(seconds / 60)

    if minutes < 2:
        return "less than a minute" if minutes == 0 else "1 minute"
    if minutes < 45:
        return f"{minutes} minutes"
    if minutes < 90:
        return "about 1 hour"
    if minutes < MINUTES_IN_DAY:
        return _plural(round_half_up(minutes / 60), "hour", prefix="about ")
    if minutes < MINUTES_IN_ALMOST_TWO_DAYS:
        return "1 day"
    if minutes < MINUTES_IN_MONTH:
        return _plural(round_half_up(minutes / MINUTES_IN_DAY), "day")
    if minutes < MINUTES_IN_TWO_MONTHS:
        return _plural(round_half_up(minutes / MINUTES_IN_MONTH), "month", prefix="about ")

    months = _calendar_months_between(earlier, later)
    if months < 12:
        return _plural(round_half_up(minutes / MINUTES_IN_MONTH), "month")

    years, months_into_year = divmod(months, 12)
    if months_into_year < 3:
        return _plural(years, "year", prefix="about ")
    if months_into_year < 9:
        return _plural(years, "year", prefix="over ")
    return _plural(years + 1, "year", prefix="almost ")


def _plural(count: int, unit: str, prefix: str = "") -> str:
    return f"{prefix}{count} {unit}" + ("" if count == 1 else "s")


def _calendar_months_between(earlier: datetime, later: datetime) -> int:
    months = (later.year - earlier.year) * 12 + (later.month - earlier.month)
    if (later.day, later.time()) < (earlier.day, earlier.time()):
        months -= 1
    return max(months, 0)


def get_timeline_duration(
    applied_at: DateLike,
    updated_at: DateLike = None,
    now: Optional[datetime] = None,
) -> TimelineDuration:
    """
    Whole days between submission and the last update (or now).

    Args:
        applied_at: Submission timestamp
        updated_at: End of the span; defaults to ``now``
        now: Reference time when ``updated_at`` is missing

    Returns:
        TimelineDuration; ``(0, "Unknown")`` for unparseable input.
    """
    start = parse_timestamp(applied_at)
    if updated_at:
        end = parse_timestamp(updated_at)
    else:
        end = parse_timestamp(now) if now is not None else utc_now()

    if start is None or end is None:
        return TimelineDuration(total_days=0, formatted_duration=UNKNOWN_DURATION)

    total_days = max(0, (end - start) // timedelta(days=1))
    if total_days == 0:
        formatted = "Today"
    elif total_days == 1:
        formatted = "1 day"
    else:
        formatted = f"{total_days} days"
    return TimelineDuration(total_days=total_days, formatted_duration=formatted)


def estimate_time_to_next_step(
    status: Union[ApplicationStatus, str],
    applied_at: DateLike = None,
    now: Optional[datetime] = None,
) -> TimeEstimate:
    """
    Typical wait before the next status change.

    ``is_overdue`` is set once the days elapsed since ``applied_at`` exceed
    the typical wait; terminal statuses are never overdue.
    """
    parsed = ApplicationStatus.parse(status)
    if parsed is None:
        return TimeEstimate(estimated_days=0, message="", is_overdue=False)

    estimate = ESTIMATES[parsed]
    is_overdue = False
    if estimate.days > 0:
        elapsed = elapsed_days(applied_at, now)
        is_overdue = elapsed is not None and elapsed > estimate.days

    return TimeEstimate(
        estimated_days=estimate.days,
        message=estimate.message,
        is_overdue=is_overdue,
    )


def calculate_timeline_progress(steps: Iterable[TimelineStep]) -> StepProgress:
    """Count completed steps in an already built timeline."""
    steps = list(steps)
    completed = sum(1 for step in steps if step.is_completed)
    total = len(steps)
    percentage = round_half_up(completed * 100 / total) if total else 0
    return StepProgress(completed=completed, total=total, percentage=percentage)


def is_timeline_complete(steps: Iterable[TimelineStep]) -> bool:
    """Check if every step is done and the timeline ends in a decision."""
    steps = list(steps)
    return (
        bool(steps)
        and all(step.is_completed for step in steps)
        and any(step.icon in (StepIcon.ACCEPTED, StepIcon.REJECTED) for step in steps)
    )
