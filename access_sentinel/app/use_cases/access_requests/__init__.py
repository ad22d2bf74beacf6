"""
Access Request Use Cases

The request / approve / revoke ledger for protected resources.
"""

from .request_access_use_case import RequestAccessUseCase
from .decide_access_request_use_case import DecideAccessRequestUseCase
from .list_access_requests_use_case import ListAccessRequestsUseCase
from .dtos import AccessRequestListResponse, AccessRequestView

__all__ = [
    "RequestAccessUseCase",
    "DecideAccessRequestUseCase",
    "ListAccessRequestsUseCase",
    "AccessRequestListResponse",
    "AccessRequestView",
]
