from fastapi import APIRouter, Depends
from aguli_admin.security.auth import user_backend
from aguli_admin.services.backend import API_PREFIX, BackendClient, BackendError, http_error
from aguli_admin.logging_setup import log_event

router = APIRouter(prefix="/api/citizen", tags=["citizen"])

def fetch_citizen_news(client: BackendClient) -> list[dict]:
    return client.get(f"{API_PREFIX}/citizen/getall").get("data") or []

@router.get("")
def list_citizen_news(client: BackendClient = Depends(user_backend)):
    try:
        return fetch_citizen_news(client)
    except BackendError as e:
        raise http_error(e)

@router.delete("/{news_id}")
def delete_citizen_news(news_id: str, client: BackendClient = Depends(user_backend)):
    try:
        client.delete(f"{API_PREFIX}/citizen/delete/{news_id}")
    except BackendError as e:
        raise http_error(e)
    log_event("citizen_news_delete", news_id=news_id)
    return {"ok": True, "message": "News deleted successfully"}
