"""Form-layer helpers: validation and immutable editing operations."""

from eventdesk.forms.editor import (
    add_image,
    add_tag,
    add_ticket,
    form_from_record,
    remove_image,
    remove_tag,
    remove_ticket,
    set_featured_image,
    update_ticket,
)
from eventdesk.forms.validation import (
    coerce_form,
    ensure_valid,
    errors_from_pydantic,
    validate_event_form,
)

__all__ = [
    # Validation
    "validate_event_form",
    "ensure_valid",
    "coerce_form",
    "errors_from_pydantic",
    # Editing
    "form_from_record",
    "add_tag",
    "remove_tag",
    "add_image",
    "remove_image",
    "set_featured_image",
    "add_ticket",
    "update_ticket",
    "remove_ticket",
]
