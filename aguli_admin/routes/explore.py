from fastapi import APIRouter, Depends, UploadFile, File, HTTPException, Query
from aguli_admin.config import settings
from aguli_admin.schemas import ComposeFields, ComposeOut, IndexIn
from aguli_admin.security.auth import AdminUser, require_user, user_backend
from aguli_admin.services.backend import API_PREFIX, BackendClient, BackendError, http_error
from aguli_admin.services.compose import ComposeSession, SubmitInProgress, compose_store
from aguli_admin.services.image_check import filter_images
from aguli_admin.services.image_set import Drop, DragStart, DragHover, DragEnd, Remove
from aguli_admin.services.listing import STATUS_FILTERS, filter_explore_posts, paginate
from aguli_admin.services.submission import submit_explore
from aguli_admin.logging_setup import log_event

router = APIRouter(prefix="/api/explore", tags=["explore"])

def fetch_explore_posts(client: BackendClient) -> list[dict]:
    body = client.get(f"{API_PREFIX}/explore/getall")
    return body.get("data") or []

@router.get("")
def list_explore_posts(
    search: str = "",
    status: str = Query("all"),
    page: int = 1,
    client: BackendClient = Depends(user_backend),
):
    if status not in STATUS_FILTERS:
        raise HTTPException(status_code=422, detail=f"status must be one of {', '.join(STATUS_FILTERS)}")
    try:
        posts = fetch_explore_posts(client)
    except BackendError as e:
        raise http_error(e)
    return paginate(filter_explore_posts(posts, search, status), page, settings.explore_page_size)

@router.delete("/{post_id}")
def delete_explore_post(post_id: str, client: BackendClient = Depends(user_backend)):
    try:
        client.delete(f"{API_PREFIX}/explore/delete/{post_id}")
    except BackendError as e:
        raise http_error(e)
    log_event("explore_delete", post_id=post_id)
    return {"ok": True, "message": "Explore post deleted"}

# --- Compose form ---

def _session(session_id: str) -> ComposeSession:
    try:
        return compose_store.get(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Compose session not found")

def _dispatch(session_id: str, event) -> dict:
    _session(session_id)
    return compose_store.dispatch(session_id, event).to_dict()

@router.post("/compose", response_model=ComposeOut)
def open_compose(user: AdminUser = Depends(require_user)):
    return compose_store.create().to_dict()

@router.get("/compose/{session_id}", response_model=ComposeOut)
def get_compose(session_id: str, user: AdminUser = Depends(require_user)):
    return _session(session_id).to_dict()

@router.patch("/compose/{session_id}", response_model=ComposeOut)
def update_compose_fields(session_id: str, payload: ComposeFields, user: AdminUser = Depends(require_user)):
    _session(session_id)
    fields = payload.model_dump(exclude_unset=True)
    if fields.get("status") is not None:
        fields["status"] = fields["status"].value
    return compose_store.update_fields(session_id, **fields).to_dict()

@router.delete("/compose/{session_id}")
def discard_compose(session_id: str, user: AdminUser = Depends(require_user)):
    if not compose_store.discard(session_id):
        raise HTTPException(status_code=404, detail="Compose session not found")
    return {"ok": True}

@router.post("/compose/{session_id}/images", response_model=ComposeOut)
def drop_images(
    session_id: str,
    images: list[UploadFile] = File(...),
    user: AdminUser = Depends(require_user),
):
    session = _session(session_id)
    uploads = [(f.filename, f.content_type, f.file.read()) for f in images]
    accepted, rejected = filter_images(uploads)
    before = len(session.state.images)
    result = compose_store.dispatch(session_id, Drop(tuple(accepted)))
    kept = len(result.state.images) - before
    log_event(
        "explore_images_dropped",
        session_id=session_id,
        accepted=kept,
        over_capacity=len(accepted) - kept,
        rejected=len(rejected) or None,
    )
    return result.to_dict()

@router.delete("/compose/{session_id}/images/{index}", response_model=ComposeOut)
def remove_image(session_id: str, index: int, user: AdminUser = Depends(require_user)):
    return _dispatch(session_id, Remove(index))

@router.post("/compose/{session_id}/drag/start", response_model=ComposeOut)
def drag_start(session_id: str, payload: IndexIn, user: AdminUser = Depends(require_user)):
    return _dispatch(session_id, DragStart(payload.index))

@router.post("/compose/{session_id}/drag/hover", response_model=ComposeOut)
def drag_hover(session_id: str, payload: IndexIn, user: AdminUser = Depends(require_user)):
    return _dispatch(session_id, DragHover(payload.index))

@router.post("/compose/{session_id}/drag/end", response_model=ComposeOut)
def drag_end(session_id: str, user: AdminUser = Depends(require_user)):
    return _dispatch(session_id, DragEnd())

@router.post("/compose/{session_id}/submit")
def submit_compose(session_id: str, client: BackendClient = Depends(user_backend)):
    _session(session_id)
    try:
        result = submit_explore(client, compose_store, session_id)
    except SubmitInProgress:
        raise HTTPException(status_code=409, detail="This post is already being submitted")
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not result["ok"]:
        raise HTTPException(status_code=502, detail=result["message"])
    try:
        session = compose_store.get(session_id)
    except KeyError:
        # discarded while the post was in flight
        session = compose_store.create()
    result["session"] = session.to_dict()
    return result
