"""Immutable editing helpers for event form data.

Each helper returns a new EventFormData and leaves its input untouched.
They keep the form-level invariants the model itself does not enforce:
the featured image is always one of the event's images.
"""

import pydantic

from eventdesk.errors import ValidationError
from eventdesk.forms.validation import errors_from_pydantic
from eventdesk.models import (
    EventFormData,
    EventImage,
    EventRecord,
    EventTicket,
    new_record_id,
)

PLACEHOLDER_IMAGE_URL = "https://img.heroui.chat/image/ai?w=800&h=400&u=event-{key}"


def form_from_record(record: EventRecord) -> EventFormData:
    """Prefill an edit form from a stored record."""
    return record.to_form_data()


def add_tag(form: EventFormData, tag: str) -> EventFormData:
    """Append a trimmed tag; blanks and duplicates are ignored."""
    tag = tag.strip()
    if not tag or tag in form.tags:
        return form
    return form.model_copy(update={"tags": (*form.tags, tag)})


def remove_tag(form: EventFormData, tag: str) -> EventFormData:
    return form.model_copy(update={"tags": tuple(t for t in form.tags if t != tag)})


def add_image(
    form: EventFormData,
    url: str | None = None,
    alt: str = "Event image",
) -> EventFormData:
    """Attach an image (a placeholder URL when none is given)."""
    image_id = new_record_id()
    image = EventImage(
        id=image_id,
        url=url or PLACEHOLDER_IMAGE_URL.format(key=image_id),
        alt=alt,
    )
    return form.model_copy(update={"images": (*form.images, image)})


def remove_image(form: EventFormData, image_id: str) -> EventFormData:
    """Detach an image, clearing the featured image if it was this one."""
    featured = form.featured_image
    if featured is not None and featured.id == image_id:
        featured = None
    return form.model_copy(
        update={
            "images": tuple(img for img in form.images if img.id != image_id),
            "featured_image": featured,
        }
    )


def set_featured_image(form: EventFormData, image_id: str) -> EventFormData:
    """Mark one of the attached images as featured.

    Raises:
        ValidationError: If ``image_id`` is not among the form's images
    """
    for image in form.images:
        if image.id == image_id:
            return form.model_copy(update={"featured_image": image})
    raise ValidationError({"featured_image": "Featured image must be one of the images"})


def add_ticket(
    form: EventFormData,
    name: str = "New Ticket",
    price: float = 0,
    available_quantity: int = 100,
) -> EventFormData:
    ticket = EventTicket(name=name, price=price, available_quantity=available_quantity)
    return form.model_copy(update={"tickets": (*(form.tickets or ()), ticket)})


def update_ticket(form: EventFormData, ticket_id: str, **changes) -> EventFormData:
    """Change fields of one ticket tier, re-validating the result.

    Raises:
        ValidationError: If the ticket does not exist or a value is invalid
    """
    tickets = list(form.tickets or ())
    for index, ticket in enumerate(tickets):
        if ticket.id == ticket_id:
            try:
                tickets[index] = EventTicket.model_validate(
                    {**ticket.model_dump(), **changes}
                )
            except pydantic.ValidationError as e:
                raise ValidationError(
                    {
                        f"tickets.{index}.{path}": message
                        for path, message in errors_from_pydantic(e).items()
                    }
                ) from e
            return form.model_copy(update={"tickets": tuple(tickets)})
    raise ValidationError({"tickets": f"Unknown ticket {ticket_id}"})


def remove_ticket(form: EventFormData, ticket_id: str) -> EventFormData:
    tickets = tuple(t for t in (form.tickets or ()) if t.id != ticket_id)
    return form.model_copy(update={"tickets": tickets})
