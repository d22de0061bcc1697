"""Query engine and derived views over event snapshots."""

from eventdesk.search.query import EventFilter, EventPage, paginate, query
from eventdesk.search.views import (
    CategoryCount,
    OverviewStats,
    StatusCount,
    category_distribution,
    overview_stats,
    status_distribution,
    upcoming_events,
)

__all__ = [
    "EventFilter",
    "EventPage",
    "query",
    "paginate",
    "CategoryCount",
    "StatusCount",
    "OverviewStats",
    "upcoming_events",
    "category_distribution",
    "status_distribution",
    "overview_stats",
]
