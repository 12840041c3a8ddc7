from fastapi import APIRouter, Depends
from aguli_admin.schemas import LiveTvIn
from aguli_admin.security.auth import user_backend
from aguli_admin.services.backend import API_PREFIX, BackendClient, BackendError, http_error
from aguli_admin.logging_setup import log_event

router = APIRouter(prefix="/api/livetv", tags=["livetv"])

def fetch_channels(client: BackendClient) -> list[dict]:
    # getall also carries recentNews, which the dashboard does not manage
    data = client.get(f"{API_PREFIX}/livetv/getall").get("data") or {}
    return data.get("liveTVChannels") or []

@router.get("")
def list_channels(client: BackendClient = Depends(user_backend)):
    try:
        return fetch_channels(client)
    except BackendError as e:
        raise http_error(e)

@router.post("")
def add_channel(payload: LiveTvIn, client: BackendClient = Depends(user_backend)):
    try:
        client.post(f"{API_PREFIX}/livetv/add", json=payload.model_dump())
    except BackendError as e:
        raise http_error(e)
    log_event("livetv_add", live_tv_name=payload.live_tv_name)
    return {"ok": True, "message": "Channel added successfully"}

@router.put("/{channel_id}")
def update_channel(channel_id: str, payload: LiveTvIn, client: BackendClient = Depends(user_backend)):
    try:
        client.put(f"{API_PREFIX}/livetv/update/{channel_id}", json=payload.model_dump())
    except BackendError as e:
        raise http_error(e)
    log_event("livetv_update", channel_id=channel_id)
    return {"ok": True, "message": "Channel updated successfully"}

@router.delete("/{channel_id}")
def delete_channel(channel_id: str, client: BackendClient = Depends(user_backend)):
    try:
        client.delete(f"{API_PREFIX}/livetv/delete/{channel_id}")
    except BackendError as e:
        raise http_error(e)
    log_event("livetv_delete", channel_id=channel_id)
    return {"ok": True, "message": "Channel deleted successfully"}
