"""Schedule relationship domain model."""

from enum import Enum


class ScheduleRelationship(str, Enum):
    """Status of a departure relative to its published schedule."""

    NO_DATA = "NoData"
    SCHEDULED = "Scheduled"
    SKIPPED = "Skipped"
