"""Build per-date event records from a user-entered event form."""

import logging
import uuid
from typing import Optional

from .models import Event, EventForm
from .recurrence import RecurrenceConfig, RecurrenceRequest, generate_occurrences

logger = logging.getLogger(__name__)


def new_group_id() -> str:
    """Create a recurrence-group identifier."""
    return f"repeat-{uuid.uuid4().hex[:12]}"


def _new_event_id() -> str:
    return uuid.uuid4().hex


def build_event_series(
    form: EventForm,
    config: Optional[RecurrenceConfig] = None,
    group_id: Optional[str] = None,
) -> list[Event]:
    """Expand an event form into the event records to persist.

    Repeating forms with an end date become one Event per occurrence, all
    sharing one ``repeat_group_id`` and flagged as repeat instances. Anything
    else becomes a single standalone Event.

    Args:
        form: Event form as entered by the user
        config: Recurrence configuration (horizon cap)
        group_id: Optional group identifier; generated when omitted

    Returns:
        List of Event instances in date order

    Raises:
        RecurrenceValidationError: If the form's repeat rule is invalid
    """
    base = {name: getattr(form, name) for name in EventForm.model_fields}

    if not form.repeat.is_repeating or form.repeat.end_date is None:
        return [Event(**base, id=_new_event_id())]

    request = RecurrenceRequest(
        start_date=form.date,
        cadence=form.repeat.type,
        interval=form.repeat.interval,
        end_date=form.repeat.end_date,
    )
    dates = generate_occurrences(request, config)

    series_id = group_id or new_group_id()
    events = []
    for occurrence in dates:
        fields = {**base, "date": occurrence}
        events.append(
            Event(
                **fields,
                id=_new_event_id(),
                repeat_group_id=series_id,
                is_repeat_instance=True,
            )
        )

    logger.debug("Built %d events for series %s (%r)", len(events), series_id, form.title)
    return events
