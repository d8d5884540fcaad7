"""Analytics domain models."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

EVENT_TYPES = frozenset(
    {
        "pantry_edit",
        "recipe_view",
        "recipe_favorite",
        "meal_plan_create",
        "recipe_feedback",
    }
)


@dataclass(frozen=True)
class AnalyticsEvent:
    """A recorded user interaction."""

    user_id: UUID
    event_type: str
    event_data: dict[str, object]
    timestamp: datetime
