"""
Audit Use Cases

Read side of the audit trail.
"""

from .list_audit_events_use_case import ListAuditEventsUseCase
from .daily_activity_counts_use_case import DailyActivityCountsUseCase
from .get_dashboard_summary_use_case import GetDashboardSummaryUseCase
from .dtos import (
    AuditEventListResponse,
    AuditEventView,
    DailyActivityCount,
    DailyActivityResponse,
    DashboardSummaryResponse,
)

__all__ = [
    "ListAuditEventsUseCase",
    "DailyActivityCountsUseCase",
    "GetDashboardSummaryUseCase",
    "AuditEventListResponse",
    "AuditEventView",
    "DailyActivityCount",
    "DailyActivityResponse",
    "DashboardSummaryResponse",
]
