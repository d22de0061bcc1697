"""Sample events used to populate the store at startup.

Dates are expressed as day offsets from "today" so the dashboard always
has upcoming events to show. A JSON seed file can replace the built-in
set (see Settings.seed_file).
"""

import json
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from eventdesk.models import EventRecord, new_record_id, slugify, utc_now

_IMAGE_BASE = "https://img.heroui.chat/image/ai?w=800&h=400&u="

# Each entry: form fields plus scheduling offsets (days from today) and
# ages of the created/updated timestamps (days before now).
_SAMPLE_EVENTS: list[dict[str, Any]] = [
    {
        "title": "Annual Tech Conference 2024",
        "description": (
            "Join us for the biggest tech conference of the year featuring keynote "
            "speakers from leading tech companies, workshops, networking "
            "opportunities, and the latest in technology innovations."
        ),
        "short_description": (
            "The biggest tech conference of the year with industry leaders and "
            "innovative workshops."
        ),
        "offsets": (10, 12),
        "times": ("09:00", "17:00"),
        "location": {
            "address": "123 Convention Center Way",
            "city": "San Francisco",
            "state": "CA",
            "zip_code": "94103",
            "country": "USA",
            "venue_details": "Main Exhibition Hall, 2nd Floor",
        },
        "images": [
            ("tech-conference", "Tech Conference Banner"),
            ("tech-conference-2", "Conference Workshop"),
        ],
        "featured_image": ("tech-conference-featured", "Tech Conference Featured Image"),
        "category": "Technology",
        "tags": ["tech", "conference", "innovation", "networking"],
        "status": "published",
        "is_public": True,
        "is_featured": True,
        "capacity": 1500,
        "contact": {
            "name": "Event Organizer",
            "email": "organizer@techconference.com",
            "phone": "+1 (555) 123-4567",
        },
        "tickets": [
            ("Early Bird", 299.99, 200, 2),
            ("Regular", 399.99, 800, 5),
            ("VIP", 699.99, 100, 2),
        ],
        "age": (30, 0),
    },
    {
        "title": "Summer Music Festival",
        "description": (
            "A three-day music festival featuring top artists from around the "
            "world, multiple stages, food vendors, and camping options for attendees."
        ),
        "short_description": (
            "Three days of music, food, and fun with top artists from around the world."
        ),
        "offsets": (30, 33),
        "times": ("12:00", "23:00"),
        "location": {
            "address": "456 Festival Grounds",
            "city": "Austin",
            "state": "TX",
            "zip_code": "78701",
            "country": "USA",
            "venue_details": "Outdoor venue with multiple stages",
        },
        "images": [("music-festival", "Music Festival Stage")],
        "featured_image": ("music-festival-featured", "Music Festival Featured Image"),
        "category": "Music",
        "tags": ["music", "festival", "summer", "outdoor", "camping"],
        "status": "published",
        "is_public": True,
        "is_featured": True,
        "capacity": 10000,
        "contact": {
            "name": "Festival Coordinator",
            "email": "info@summermusicfest.com",
            "phone": "+1 (555) 987-6543",
        },
        "tickets": [
            ("General Admission", 199.99, 8000, 6),
            ("VIP Pass", 499.99, 1000, 4),
        ],
        "age": (60, 15),
    },
    {
        "title": "Business Leadership Workshop",
        "description": (
            "A one-day intensive workshop focused on developing leadership skills "
            "for business executives and managers. Learn from industry experts and "
            "network with peers."
        ),
        "short_description": (
            "Intensive leadership training for business executives and managers."
        ),
        "offsets": (15, 15),
        "times": ("08:00", "17:00"),
        "location": {
            "address": "789 Corporate Plaza",
            "city": "Chicago",
            "state": "IL",
            "zip_code": "60601",
            "country": "USA",
            "venue_details": "Executive Conference Room, 15th Floor",
        },
        "images": [("business-workshop", "Business Workshop")],
        "category": "Business",
        "tags": ["business", "leadership", "workshop", "professional development"],
        "status": "published",
        "is_public": True,
        "is_featured": False,
        "capacity": 50,
        "contact": {
            "name": "Workshop Coordinator",
            "email": "workshops@businessleadership.com",
        },
        "tickets": [
            ("Standard Registration", 799.99, 45, 3),
            ("Group Registration (3+ people)", 699.99, 15, 10),
        ],
        "age": (45, 10),
    },
    {
        "title": "Community Charity Run",
        "description": (
            "Join our annual 5K charity run to raise funds for local community "
            "programs. All ages and abilities welcome. Refreshments and "
            "entertainment provided after the race."
        ),
        "short_description": "Annual 5K run raising funds for local community programs.",
        "offsets": (20, 20),
        "times": ("07:00", "12:00"),
        "location": {
            "address": "123 City Park",
            "city": "Portland",
            "state": "OR",
            "zip_code": "97201",
            "country": "USA",
            "venue_details": "Start line at the main entrance",
        },
        "images": [("charity-run", "Charity Run")],
        "category": "Sports",
        "tags": ["charity", "run", "community", "5K", "fundraiser"],
        "status": "published",
        "is_public": True,
        "is_featured": False,
        "capacity": 500,
        "contact": {
            "name": "Event Coordinator",
            "email": "run@communitycharities.org",
            "phone": "+1 (555) 234-5678",
        },
        "tickets": [
            ("Adult Registration", 35, 400, 5),
            ("Child Registration (under 12)", 15, 100, 5),
        ],
        "age": (20, 5),
    },
    {
        "title": "Art Exhibition Opening",
        "description": (
            "Exclusive opening night for our new contemporary art exhibition "
            "featuring works from local and international artists. Wine and hors "
            "d'oeuvres will be served."
        ),
        "short_description": (
            "Opening night for contemporary art exhibition with wine reception."
        ),
        "offsets": (5, 5),
        "times": ("18:00", "21:00"),
        "location": {
            "address": "456 Gallery Street",
            "city": "New York",
            "state": "NY",
            "zip_code": "10001",
            "country": "USA",
            "venue_details": "Main Gallery, First Floor",
        },
        "images": [("art-exhibition", "Art Exhibition")],
        "category": "Arts & Culture",
        "tags": ["art", "exhibition", "gallery", "opening", "contemporary"],
        "status": "published",
        "is_public": True,
        "is_featured": True,
        "capacity": 150,
        "contact": {
            "name": "Gallery Director",
            "email": "director@artgallery.com",
            "phone": "+1 (555) 876-5432",
        },
        "tickets": [
            ("General Admission", 25, 120, 4),
            ("VIP (Early Access + Catalog)", 75, 30, 2),
        ],
        "age": (15, 0),
    },
    {
        "title": "Product Launch Webinar",
        "description": (
            "Join us for the virtual launch of our newest product line. Learn about "
            "features, pricing, and special launch offers."
        ),
        "short_description": "Virtual launch event for our newest product line.",
        "offsets": (25, 25),
        "times": ("14:00", "16:00"),
        "location": {
            "address": "Online",
            "city": "Virtual",
            "state": "N/A",
            "zip_code": "N/A",
            "country": "Global",
            "venue_details": "Zoom Webinar",
        },
        "images": [("product-launch", "Product Launch")],
        "category": "Business",
        "tags": ["webinar", "product launch", "virtual event"],
        "status": "draft",
        "is_public": False,
        "is_featured": False,
        "contact": {
            "name": "Marketing Team",
            "email": "marketing@company.com",
        },
        "tickets": [
            ("Standard Access", 0, 1000, None),
            ("Premium Access (Q&A Session)", 49.99, 200, None),
        ],
        "age": (0, 0),
    },
]

_records_adapter = TypeAdapter(list[EventRecord])


def _image(key: str, alt: str) -> dict[str, str]:
    return {"id": new_record_id(), "url": f"{_IMAGE_BASE}{key}", "alt": alt}


def _build_record(sample: dict[str, Any], today: date, now: datetime) -> EventRecord:
    fields = dict(sample)
    start_offset, end_offset = fields.pop("offsets")
    start_time, end_time = fields.pop("times")
    created_ago, updated_ago = fields.pop("age")
    featured = fields.pop("featured_image", None)

    created_at = now - timedelta(days=created_ago)
    fields.update(
        id=new_record_id(),
        slug=slugify(fields["title"]),
        start_date=today + timedelta(days=start_offset),
        end_date=today + timedelta(days=end_offset),
        start_time=start_time,
        end_time=end_time,
        images=[_image(key, alt) for key, alt in fields["images"]],
        featured_image=_image(*featured) if featured else None,
        tickets=[
            {
                "id": new_record_id(),
                "name": name,
                "price": price,
                "available_quantity": quantity,
                "max_per_order": max_per_order,
            }
            for name, price, quantity, max_per_order in fields["tickets"]
        ],
        created_at=created_at,
        updated_at=max(created_at, now - timedelta(days=updated_ago)),
    )
    return EventRecord.model_validate(fields)


def build_seed_events(today: date | None = None) -> list[EventRecord]:
    """Build the built-in sample events relative to ``today``.

    Args:
        today: Reference date for event scheduling (default: current UTC date)

    Returns:
        Five published events followed by one draft, in display order
    """
    now = utc_now()
    if today is None:
        today = now.date()
    else:
        now = datetime.combine(today, time(12, 0), tzinfo=now.tzinfo)
    return [_build_record(sample, today, now) for sample in _SAMPLE_EVENTS]


def load_seed_file(path: Path) -> list[EventRecord]:
    """Load seed records from a JSON file holding a list of event records.

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If a record does not match the schema
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    return _records_adapter.validate_python(data)
