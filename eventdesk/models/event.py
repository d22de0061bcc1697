"""Event record model and its nested value objects.

An event moves through three shapes:
- EventFormData: what a caller fills in (may be incomplete while editing)
- EventRecord: the stored snapshot with id, slug and timestamps
- EventUpdate: a partial payload merged over an existing record
"""

import re
from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from eventdesk.models.base import ValueObject, new_record_id

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

# Offered to selection UIs; category itself stays free text
EVENT_CATEGORIES: tuple[str, ...] = (
    "Technology",
    "Music",
    "Business",
    "Sports",
    "Arts & Culture",
    "Education",
    "Food & Drink",
    "Health & Wellness",
    "Community",
    "Other",
)

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")


def slugify(title: str) -> str:
    """Derive the URL slug for a title.

    Lower-cases, strips everything except word characters and whitespace,
    then turns each whitespace run into a hyphen.

    >>> slugify("Annual Tech Conference 2024!")
    'annual-tech-conference-2024'
    """
    stripped = _NON_WORD.sub("", title.lower())
    return _WHITESPACE.sub("-", stripped)


class EventStatus(str, Enum):
    """Publication status of an event."""

    DRAFT = "draft"
    PUBLISHED = "published"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class EventLocation(ValueObject):
    """Where an event takes place."""

    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = ""
    venue_details: str | None = None


class EventContact(ValueObject):
    """Organizer contact details."""

    name: str = ""
    email: str = ""
    phone: str | None = None


class EventImage(ValueObject):
    """An image attached to an event."""

    id: str = Field(default_factory=new_record_id)
    url: str
    alt: str = ""


class EventTicket(ValueObject):
    """A ticket tier offered for an event."""

    id: str = Field(default_factory=new_record_id)
    name: str
    price: float = Field(default=0, ge=0, description="Price per ticket")
    available_quantity: int = Field(default=0, ge=0)
    max_per_order: int | None = Field(default=None, ge=1)


class EventFormData(BaseModel):
    """Caller-supplied event fields (everything except id, slug, timestamps).

    Text fields default to empty strings so an incomplete form can be
    represented and reported field by field by the form validator.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
    )

    title: str = ""
    short_description: str = ""
    description: str = ""
    start_date: date | None = None
    end_date: date | None = None
    start_time: str = "09:00"
    end_time: str = "17:00"
    location: EventLocation = Field(default_factory=EventLocation)
    images: tuple[EventImage, ...] = ()
    featured_image: EventImage | None = None
    category: str = ""
    tags: tuple[str, ...] = ()
    status: EventStatus = EventStatus.DRAFT
    is_public: bool = False
    is_featured: bool = False
    capacity: int | None = Field(default=None, gt=0)
    contact: EventContact = Field(default_factory=EventContact)
    tickets: tuple[EventTicket, ...] | None = None

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, tags: tuple[str, ...]) -> tuple[str, ...]:
        """Drop blank and repeated tags, keeping first-seen order."""
        seen: dict[str, None] = {}
        for tag in tags:
            tag = tag.strip()
            if tag:
                seen.setdefault(tag, None)
        return tuple(seen)


class EventRecord(EventFormData):
    """The canonical stored representation of an event.

    Records are frozen; every mutation produces a new record.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_record_id, description="Opaque identifier")
    slug: str = Field(description="Derived from the title at creation time")
    start_date: date
    end_date: date
    start_time: str = Field(pattern=TIME_PATTERN)
    end_time: str = Field(pattern=TIME_PATTERN)
    created_at: datetime
    updated_at: datetime

    def to_form_data(self) -> EventFormData:
        """Return the editable fields of this record as form data."""
        return EventFormData.model_validate(
            self.model_dump(exclude={"id", "slug", "created_at", "updated_at"})
        )


class EventUpdate(BaseModel):
    """Partial payload for ``update``.

    Only fields explicitly set are merged. Nested objects are replaced
    wholesale, never deep-merged.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
    )

    title: str | None = None
    short_description: str | None = None
    description: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    start_time: str | None = None
    end_time: str | None = None
    location: EventLocation | None = None
    images: tuple[EventImage, ...] | None = None
    featured_image: EventImage | None = None
    category: str | None = None
    tags: tuple[str, ...] | None = None
    status: EventStatus | None = None
    is_public: bool | None = None
    is_featured: bool | None = None
    capacity: int | None = Field(default=None, gt=0)
    contact: EventContact | None = None
    tickets: tuple[EventTicket, ...] | None = None

    def changes(self) -> dict:
        """Return only the explicitly provided fields, dumped for merging."""
        return self.model_dump(exclude_unset=True)
