"""Service layer for business logic."""

from tabsearch.services.record_service import RecordService
from tabsearch.services.search_service import SearchService

__all__ = [
    "RecordService",
    "SearchService",
]
