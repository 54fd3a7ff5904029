"""Schedule API Routes.

Event CRUD, alert preferences and the in-app banner/toast feed:
- GET/POST /schedule/events, PUT/DELETE /schedule/events/{id}
- POST /schedule/events/{id}/complete
- GET /schedule/time-options, GET /schedule/status
- PUT /schedule/sound, PUT /schedule/notifications/permission
- GET /schedule/feed
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from domains.base import NotificationPermission
from domains.reminders import (
    apply_permission_result,
    format_time_12h,
    remove_event,
    save_event,
    set_sound_toast,
    status_summary,
    time_options,
    toggle_sound,
)
from .services import Services, get_services

router = APIRouter(prefix="/schedule", tags=["Schedule"])


# ============================================================
# Pydantic Models
# ============================================================

class EventIn(BaseModel):
    """Create or edit a schedule event."""
    time: str = Field("", description="Trigger time, HH:MM (24-hour)")
    title: str = ""
    description: str = ""


class SoundIn(BaseModel):
    # Omitted flips the current setting
    enabled: Optional[bool] = None


class PermissionIn(BaseModel):
    """Result of the notification permission prompt."""
    permission: NotificationPermission


def _event_out(event) -> dict:
    return {**event.to_dict(), "displayTime": format_time_12h(event.time)}


def _saved_or_400(result: dict) -> dict:
    if result["event"] is None:
        raise HTTPException(400, result["toast"]["description"])
    return {"event": _event_out(result["event"]), "toast": result["toast"]}


# ============================================================
# Events
# ============================================================

@router.get("/events")
async def list_events(services: Services = Depends(get_services)):
    """All events, sorted by time."""
    return {"events": [_event_out(e) for e in services.notifier.events]}


@router.post("/events", status_code=201)
async def create_event(body: EventIn, services: Services = Depends(get_services)):
    """Add an event."""
    return _saved_or_400(save_event(services.notifier, body.time, body.title, body.description))


@router.put("/events/{event_id}")
async def update_event(event_id: int, body: EventIn, services: Services = Depends(get_services)):
    """Edit an event's time, title and description."""
    try:
        result = save_event(services.notifier, body.time, body.title, body.description, event_id=event_id)
    except KeyError:
        raise HTTPException(404, "Event not found")
    return _saved_or_400(result)


@router.delete("/events/{event_id}")
async def delete_event(event_id: int, services: Services = Depends(get_services)):
    try:
        toast = remove_event(services.notifier, event_id)
    except KeyError:
        raise HTTPException(404, "Event not found")
    return {"deleted": event_id, "toast": toast}


@router.post("/events/{event_id}/complete")
async def complete_event(event_id: int, services: Services = Depends(get_services)):
    """Acknowledge a fired event's banner."""
    services.feed.dismiss(event_id)
    delivered = services.notifier.mark_complete(event_id)
    return {"id": event_id, "delivered": delivered}


# ============================================================
# Preferences and status
# ============================================================

@router.get("/time-options")
async def get_time_options():
    """Times offered by the event form."""
    return {"options": [{"value": t, "label": format_time_12h(t)} for t in time_options()]}


@router.get("/status")
async def get_status(services: Services = Depends(get_services)):
    return status_summary(services.notifier)


@router.put("/sound")
async def set_sound(body: SoundIn, services: Services = Depends(get_services)):
    """Turn event sounds on or off (turning on plays a test chime)."""
    if body.enabled is None:
        toast = toggle_sound(services.notifier)
    else:
        services.notifier.set_sound_enabled(body.enabled)
        toast = set_sound_toast(services.notifier.sound_enabled)
    return {"sound": services.notifier.sound_enabled, "toast": toast}


@router.put("/notifications/permission")
async def set_permission(body: PermissionIn, services: Services = Depends(get_services)):
    toast = apply_permission_result(services.notifier, body.permission)
    return {"permission": body.permission.value, "toast": toast}


@router.get("/feed")
async def get_feed(
    kind: Optional[str] = Query(default=None, pattern="^(banner|toast)$"),
    services: Services = Depends(get_services),
):
    """Unexpired in-app banners and toasts, oldest first."""
    return {"items": [item.to_dict() for item in services.feed.items(kind)]}
