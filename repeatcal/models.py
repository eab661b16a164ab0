"""Data models for recurring calendar events."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

CalendarDate = date


class RepeatType(str, Enum):
    """Supported repetition cadences."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class RepeatInfo(BaseModel):
    """Recurrence rule attached to an event."""

    type: RepeatType = Field(default=RepeatType.NONE, description="Repeat cadence")
    interval: int = Field(default=1, description="Number of cadence units between occurrences")
    end_date: Optional[CalendarDate] = Field(default=None, description="Last allowed occurrence date")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_interval(self) -> "RepeatInfo":
        if self.type != RepeatType.NONE and self.interval < 1:
            raise ValueError(f"interval must be >= 1 for {self.type.value} repeats, got {self.interval}")
        return self

    @property
    def is_repeating(self) -> bool:
        """Check if this rule describes a series rather than a single event."""
        return self.type != RepeatType.NONE

    @field_serializer("end_date", when_used="unless-none")
    def serialize_end_date(self, value: CalendarDate) -> str:
        """Serialize end date as YYYY-MM-DD."""
        return value.isoformat()


class EventForm(BaseModel):
    """User-entered event data before it is persisted."""

    title: str = Field(..., description="Event title")
    date: CalendarDate = Field(..., description="Event date (anchor date for repeats)")
    start_time: str = Field(default="", description="Start time, HH:MM")
    end_time: str = Field(default="", description="End time, HH:MM")
    description: str = Field(default="", description="Free-text description")
    location: str = Field(default="", description="Location")
    category: str = Field(default="", description="Category label")
    repeat: RepeatInfo = Field(default_factory=RepeatInfo, description="Recurrence rule")
    notification_time: int = Field(default=10, description="Reminder lead time in minutes")

    model_config = ConfigDict(frozen=True)

    @field_serializer("date")
    def serialize_date(self, value: CalendarDate) -> str:
        """Serialize event date as YYYY-MM-DD."""
        return value.isoformat()


class Event(EventForm):
    """Persisted event, possibly one occurrence of a recurring series."""

    id: str = Field(..., description="Event ID")
    repeat_group_id: Optional[str] = Field(
        default=None, description="Identifier shared by every occurrence of one series"
    )
    is_repeat_instance: bool = Field(
        default=False, description="True if generated from a recurrence rule"
    )
    original_event_id: Optional[str] = Field(
        default=None, description="Source event ID when detached by a single-instance edit"
    )
