"""Query/filter engine over event snapshots.

Pure functions: they never mutate their input and always return a new
list, so a caller cannot corrupt the store through a result.
"""

from collections.abc import Iterable, Mapping
from math import ceil
from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from eventdesk.errors import ValidationError
from eventdesk.forms.validation import errors_from_pydantic
from eventdesk.models import EventRecord, EventStatus

DEFAULT_PAGE_SIZE = 10


class EventFilter(BaseModel):
    """Filter criteria for event listings.

    All provided criteria are ANDed; omitted ones impose no constraint.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: EventStatus | None = Field(
        default=None,
        description="Keep only events with exactly this status",
    )
    category: str | None = Field(
        default=None,
        description="Keep only events with exactly this category",
    )
    featured: bool | None = Field(
        default=None,
        description="Keep only events whose featured flag matches",
    )
    search: str | None = Field(
        default=None,
        description="Case-insensitive text in title, descriptions or tags",
    )

    @field_validator("status", mode="before")
    @classmethod
    def blank_status_is_unset(cls, v: object) -> object:
        """An empty status selection means no status constraint."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def matches(self, event: EventRecord) -> bool:
        """Return True when ``event`` satisfies every supplied criterion."""
        if self.status and event.status != self.status:
            return False
        if self.category and event.category != self.category:
            return False
        if self.featured is not None and event.is_featured != self.featured:
            return False
        if self.search and not matches_search(event, self.search):
            return False
        return True


class EventPage(BaseModel):
    """One page of an event listing."""

    items: list[EventRecord] = Field(default_factory=list)
    page: int = Field(ge=1)
    per_page: int = Field(ge=1)
    total: int = Field(ge=0, description="Records across all pages")
    pages: int = Field(ge=0, description="Number of pages")


def matches_search(event: EventRecord, text: str) -> bool:
    """Case-insensitive substring test over title, descriptions and tags."""
    needle = text.lower()
    return (
        needle in event.title.lower()
        or needle in event.description.lower()
        or needle in event.short_description.lower()
        or any(needle in tag.lower() for tag in event.tags)
    )


def as_filter(filters: EventFilter | Mapping[str, Any] | None) -> EventFilter:
    """Normalize a filter argument (model, mapping or None).

    Raises:
        ValidationError: If the mapping has unknown keys or a bad value
    """
    if filters is None:
        return EventFilter()
    if isinstance(filters, EventFilter):
        return filters
    try:
        return EventFilter.model_validate(dict(filters))
    except pydantic.ValidationError as e:
        raise ValidationError(errors_from_pydantic(e)) from e


def query(
    collection: Iterable[EventRecord],
    filters: EventFilter | Mapping[str, Any] | None = None,
) -> list[EventRecord]:
    """Return the events matching ``filters`` in their original order.

    Args:
        collection: Events to filter (typically a store snapshot)
        filters: Optional criteria; None returns a copy of everything

    Returns:
        New list of matching events
    """
    criteria = as_filter(filters)
    return [event for event in collection if criteria.matches(event)]


def paginate(
    records: list[EventRecord],
    page: int = 1,
    per_page: int = DEFAULT_PAGE_SIZE,
) -> EventPage:
    """Slice ``records`` into a 1-based page.

    Pages past the end yield an empty item list rather than an error.
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    start = (page - 1) * per_page
    return EventPage(
        items=list(records[start : start + per_page]),
        page=page,
        per_page=per_page,
        total=len(records),
        pages=ceil(len(records) / per_page),
    )
