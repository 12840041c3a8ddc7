from fastapi import APIRouter, Depends
from aguli_admin.schemas import CategoryCreate, CategoryUpdate
from aguli_admin.security.auth import user_backend
from aguli_admin.services.backend import API_PREFIX, BackendClient, BackendError, http_error
from aguli_admin.logging_setup import log_event

router = APIRouter(prefix="/api/categories", tags=["categories"])

def _key_params(client: BackendClient) -> dict:
    return {"key": client.api_key} if client.api_key else {}

def fetch_categories(client: BackendClient) -> list[dict]:
    body = client.get(f"{API_PREFIX}/category/list", params=_key_params(client))
    return body.get("categories") or (body.get("data") or {}).get("categories") or []

@router.get("")
def list_categories(client: BackendClient = Depends(user_backend)):
    try:
        return fetch_categories(client)
    except BackendError as e:
        raise http_error(e)

@router.post("")
def add_category(payload: CategoryCreate, client: BackendClient = Depends(user_backend)):
    try:
        body = client.post(f"{API_PREFIX}/category/add", params=_key_params(client), json=payload.model_dump())
    except BackendError as e:
        raise http_error(e)
    log_event("category_add", cat_name=payload.cat_name)
    return {"ok": True, "message": "Category added successfully!", "data": body.get("data")}

@router.put("/{cat_id}")
def edit_category(cat_id: str, payload: CategoryUpdate, client: BackendClient = Depends(user_backend)):
    try:
        body = client.put(f"{API_PREFIX}/category/edit/{cat_id}", json=payload.model_dump())
    except BackendError as e:
        raise http_error(e)
    log_event("category_edit", cat_id=cat_id)
    return {"ok": True, "message": "Category updated successfully!", "data": body.get("data")}

@router.delete("/{cat_id}")
def delete_category(cat_id: str, client: BackendClient = Depends(user_backend)):
    try:
        client.delete(f"{API_PREFIX}/category/delete/{cat_id}")
    except BackendError as e:
        raise http_error(e)
    log_event("category_delete", cat_id=cat_id)
    return {"ok": True, "message": "Category deleted successfully!"}
