"""Reminder data types."""

from dataclasses import dataclass, field, asdict


@dataclass
class ScheduleEvent:
    """A time-of-day reminder.

    ``time`` is always ``HH:MM`` (24-hour). ``id`` and ``created_at`` are
    millisecond timestamps assigned on creation.
    """
    id: int
    time: str
    title: str
    description: str = ""
    created_at: int = 0

    def to_dict(self) -> dict:
        """JSON shape used by the store and the API."""
        return {
            "id": self.id,
            "time": self.time,
            "title": self.title,
            "description": self.description,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScheduleEvent":
        return cls(
            id=int(data["id"]),
            time=data["time"],
            title=data["title"],
            description=data.get("description") or "",
            created_at=int(data.get("createdAt") or 0),
        )


@dataclass
class DispatchReport:
    """Which channels went out when an event fired."""
    event_id: int
    sound: bool = False
    notification: bool = False
    in_app: bool = False
    toast: bool = False
    errors: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return asdict(self)
