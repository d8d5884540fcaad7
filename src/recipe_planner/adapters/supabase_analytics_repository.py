"""Supabase repository for analytics events."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from recipe_planner.domain.analytics import AnalyticsEvent
from recipe_planner.services.analytics import AnalyticsRepository


@dataclass
class SupabaseAnalyticsRepository(AnalyticsRepository):
    """Supabase-backed analytics repository."""

    client: Client

    def create_event(self, event: AnalyticsEvent) -> None:
        """Create an analytics event row."""
        self.client.table("analytics_events").insert(
            {
                "user_id": str(event.user_id),
                "event_type": event.event_type,
                "event_data": event.event_data,
                "timestamp": event.timestamp.isoformat(),
            }
        ).execute()

    def list_events(
        self, user_id: UUID, event_type: str | None, limit: int
    ) -> list[AnalyticsEvent]:
        """Return recent events for a user."""
        query = (
            self.client.table("analytics_events")
            .select("*")
            .eq("user_id", str(user_id))
        )
        if event_type:
            query = query.eq("event_type", event_type)
        response = query.order("timestamp", desc=True).limit(limit).execute()
        return [
            AnalyticsEvent(
                user_id=UUID(row["user_id"]),
                event_type=str(row.get("event_type", "")),
                event_data=row.get("event_data") or {},
                timestamp=datetime.fromisoformat(row["timestamp"]),
            )
            for row in response.data or []
        ]
