from fastapi import APIRouter, Depends, HTTPException
from aguli_admin.schemas import PushNotificationIn
from aguli_admin.security.auth import user_backend
from aguli_admin.services.backend import BackendClient, BackendError, http_error
from aguli_admin.logging_setup import log_event

router = APIRouter(prefix="/api/push-notifications", tags=["push"])

PUSH_SEND_PATH = "/api/v1/push-notifications/send"

@router.post("/send")
def send_push_notification(payload: PushNotificationIn, client: BackendClient = Depends(user_backend)):
    """Broadcast a notification to every app user, linking to a news item."""
    if payload.missing_required():
        raise HTTPException(status_code=422, detail="Title, body, and news ID are required")
    try:
        client.post(PUSH_SEND_PATH, json=payload.model_dump())
    except BackendError as e:
        raise http_error(e)
    log_event("push_notification_sent", news_id=payload.news_id, screen=payload.screen)
    return {"ok": True, "message": "Push notification sent successfully to all users"}
