"""Analytics event tracking service."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from recipe_planner.domain.analytics import EVENT_TYPES, AnalyticsEvent

_logger = logging.getLogger(__name__)


class AnalyticsRepository(Protocol):
    """Persistence interface for analytics events."""

    def create_event(self, event: AnalyticsEvent) -> None:
        """Persist an analytics event."""

    def list_events(
        self, user_id: UUID, event_type: str | None, limit: int
    ) -> list[AnalyticsEvent]:
        """Return recent events for a user."""


@dataclass
class AnalyticsService:
    """Service for recording user interactions."""

    repository: AnalyticsRepository

    def track_event(
        self, user_id: UUID, event_type: str, event_data: dict[str, object]
    ) -> bool:
        """Record an event; return False instead of raising on failure."""
        if event_type not in EVENT_TYPES:
            _logger.warning("Unknown analytics event type: %s", event_type)
            return False
        event = AnalyticsEvent(
            user_id=user_id,
            event_type=event_type,
            event_data=event_data,
            timestamp=datetime.now(tz=UTC),
        )
        try:
            self.repository.create_event(event)
        except Exception:
            _logger.exception(
                "Failed to track analytics event", extra={"event_type": event_type}
            )
            return False
        return True

    def track_pantry_edit(self, user_id: UUID, action: str, ingredient: str) -> bool:
        return self.track_event(
            user_id, "pantry_edit", {"action": action, "ingredient": ingredient}
        )

    def track_recipe_view(self, user_id: UUID, recipe_id: str, title: str) -> bool:
        return self.track_event(
            user_id, "recipe_view", {"recipeId": recipe_id, "recipeTitle": title}
        )

    def track_recipe_favorite(
        self, user_id: UUID, action: str, recipe_id: str, title: str
    ) -> bool:
        return self.track_event(
            user_id,
            "recipe_favorite",
            {"action": action, "recipeId": recipe_id, "recipeTitle": title},
        )

    def track_meal_plan_change(
        self, user_id: UUID, payload: dict[str, object]
    ) -> bool:
        return self.track_event(user_id, "meal_plan_create", payload)

    def track_recipe_feedback(
        self, user_id: UUID, recipe_id: str, title: str, feedback: str
    ) -> bool:
        return self.track_event(
            user_id,
            "recipe_feedback",
            {"recipeId": recipe_id, "recipeTitle": title, "feedback": feedback},
        )

    def list_events(
        self, user_id: UUID, event_type: str | None = None, limit: int = 100
    ) -> list[AnalyticsEvent]:
        """Return recent events, or an empty list when unavailable."""
        try:
            return self.repository.list_events(user_id, event_type, limit)
        except Exception:
            _logger.exception("Failed to list analytics events")
            return []
