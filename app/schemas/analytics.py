"""
Pydantic schemas for the analytics endpoint.
"""
from typing import List

from app.schemas.base import CamelModel


class CompanyCount(CamelModel):
    name: str
    count: int


class StatusCount(CamelModel):
    status: str
    count: int
    percentage: int


class LocationCount(CamelModel):
    location: str
    count: int


class MonthCount(CamelModel):
    month: str  # YYYY-MM
    count: int


class AnalyticsResponse(CamelModel):
    total_applications: int = 0
    response_rate: int = 0
    interviews: int = 0
    this_month: int = 0
    top_companies: List[CompanyCount] = []
    applications_by_status: List[StatusCount] = []
    top_locations: List[LocationCount] = []
    applications_by_month: List[MonthCount] = []
