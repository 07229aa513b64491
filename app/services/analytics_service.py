"""
Analytics over a user's job applications.

Pure aggregation: takes the already-loaded application rows and returns
counts and percentages. Nothing here touches the database.
"""
import logging
from collections import Counter
from datetime import date
from typing import List, Optional, Sequence

from app.db.models.job_application import ApplicationStatus
from app.schemas.analytics import (
    AnalyticsResponse,
    CompanyCount,
    LocationCount,
    MonthCount,
    StatusCount,
)

logger = logging.getLogger(__name__)

TIME_RANGES = ("all", "month", "quarter")
TOP_N = 5
UNSPECIFIED_LOCATION = "Not specified"

# Statuses that mean the employer has not answered yet
NO_RESPONSE_STATUSES = frozenset({ApplicationStatus.APPLIED.value})
INTERVIEW_STATUSES = frozenset({ApplicationStatus.INTERVIEW.value})


def _percent(part: int, whole: int) -> int:
    """Whole-number percentage, rounding halves up. 0 when whole is 0."""
    if whole <= 0:
        return 0
    return int(part * 100 / whole + 0.5)


def _status_value(application) -> str:
    status = application.status
    return getattr(status, "value", status)


def _same_month(day: date, today: date) -> bool:
    return day.year == today.year and day.month == today.month


def quarter_start(today: date) -> date:
    """First day of the calendar quarter containing today."""
    return date(today.year, ((today.month - 1) // 3) * 3 + 1, 1)


def filter_by_time_range(applications: Sequence, time_range: str, today: date) -> List:
    """
    Keep the applications that fall inside time_range.

    Raises:
        ValueError: for an unknown time range
    """
    if time_range not in TIME_RANGES:
        raise ValueError(f"timeRange must be one of: {', '.join(TIME_RANGES)}")

    if time_range == "month":
        return [app for app in applications if _same_month(app.application_date, today)]
    if time_range == "quarter":
        start = quarter_start(today)
        return [app for app in applications if app.application_date >= start]
    return list(applications)


def _top(counter: Counter, limit: int = TOP_N):
    # sorted() is stable and Counter keeps insertion order, so ties stay in first-seen order
    return sorted(counter.items(), key=lambda item: item[1], reverse=True)[:limit]


def compute_analytics(
    applications: Sequence,
    time_range: str = "all",
    today: Optional[date] = None,
) -> AnalyticsResponse:
    """
    Aggregate a user's applications.

    Args:
        applications: Objects exposing company, status, location and application_date
        time_range: "all", "month" or "quarter"
        today: Reference date (defaults to date.today())

    Returns:
        AnalyticsResponse; all zeros and empty lists when there is nothing to count
    """
    today = today or date.today()
    filtered = filter_by_time_range(applications, time_range, today)

    total = len(filtered)
    this_month = sum(1 for app in applications if _same_month(app.application_date, today))

    if total == 0:
        return AnalyticsResponse(this_month=this_month)

    statuses = [_status_value(app) for app in filtered]
    responded = sum(1 for status in statuses if status not in NO_RESPONSE_STATUSES)
    interviews = sum(1 for status in statuses if status in INTERVIEW_STATUSES)

    status_counts = Counter(statuses)
    company_counts = Counter(app.company for app in filtered)
    location_counts = Counter(app.location or UNSPECIFIED_LOCATION for app in filtered)
    month_counts = Counter(app.application_date.strftime("%Y-%m") for app in filtered)

    result = AnalyticsResponse(
        total_applications=total,
        response_rate=_percent(responded, total),
        interviews=interviews,
        this_month=this_month,
        top_companies=[CompanyCount(name=name, count=count) for name, count in _top(company_counts)],
        applications_by_status=[
            StatusCount(status=status, count=count, percentage=_percent(count, total))
            for status, count in status_counts.items()
        ],
        top_locations=[LocationCount(location=loc, count=count) for loc, count in _top(location_counts)],
        applications_by_month=[
            MonthCount(month=month, count=count) for month, count in sorted(month_counts.items())
        ],
    )
    logger.debug(f"Analytics computed: range={time_range}, total={total}")
    return result
