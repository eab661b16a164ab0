"""Series membership checks for already-materialized events."""

from .models import Event, RepeatInfo, RepeatType

REPEAT_GLYPH = " 🔁"


def is_recurring_occurrence(event: Event) -> bool:
    """Return True if the event belongs to a recurring series.

    An event is part of a series only when it carries a non-empty
    ``repeat_group_id`` and its cadence is not ``none``. Events detached from
    a series by a single-instance edit have cadence ``none`` and return False.
    """
    return bool(event.repeat_group_id) and event.repeat.type != RepeatType.NONE


def repeat_indicator_glyph(event: Event) -> str:
    """Return the repeat marker for recurring events, else an empty string."""
    return REPEAT_GLYPH if is_recurring_occurrence(event) else ""


def detach_occurrence(event: Event) -> Event:
    """Detach one occurrence from its series for a single-instance edit.

    Returns:
        Copy of the event with cadence ``none``, no group id, and
        ``original_event_id`` pointing back at the source occurrence
    """
    return event.model_copy(
        update={
            "repeat": RepeatInfo(type=RepeatType.NONE, interval=event.repeat.interval),
            "repeat_group_id": None,
            "is_repeat_instance": False,
            "original_event_id": event.id,
        }
    )
