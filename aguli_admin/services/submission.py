# Copyright (c) 2026 Mohammed Hassan. All rights reserved.
# Proprietary and confidential. Unauthorized copying, modification, distribution, or use is prohibited.

from enum import Enum
from aguli_admin.logging_setup import log_event
from .backend import API_PREFIX, BackendClient, BackendError, multipart_fields
from .image_set import ImageSet

EXPLORE_ADD_PATH = f"{API_PREFIX}/explore/add"
IMAGE_FIELD = "explore_thumb"

class ExploreStatus(str, Enum):
    active = "active"
    inactive = "inactive"

def build_explore_payload(title: str, description: str, status: str, images: ImageSet) -> list:
    """
    Multipart parts for requests' `files=` argument.

    Scalar fields come first, once each. Every image follows under the same
    repeated `explore_thumb` field, in current ImageSet order. An invalid
    status raises ValueError.
    """
    status = ExploreStatus(status).value
    parts = multipart_fields({
        "explore_title": title,
        "explore_descriptions": description,
        "explore_status": status,
    })
    parts += [(IMAGE_FIELD, (img.filename, img.data, img.content_type)) for img in images]
    return parts

def image_parts(parts: list) -> list:
    return [p for p in parts if p[0] == IMAGE_FIELD]

def submit_explore(client: BackendClient, store, session_id: str) -> dict:
    """
    Post a compose session to the backend.

    The session lock is not held during the network call, so the form stays
    interactive; the session's `submitting` flag rejects a second submit
    meanwhile (SubmitInProgress). On success the session is reset. On failure
    the arranged images are kept and {"ok": False, "message": ...} is returned
    for the page to show.
    """
    snapshot = store.begin_submit(session_id)
    ok = False
    try:
        parts = build_explore_payload(snapshot.title, snapshot.description, snapshot.status, snapshot.images)
        log_event("explore_submit_start", session_id=session_id, image_count=len(image_parts(parts)))
        try:
            body = client.post(EXPLORE_ADD_PATH, files=parts)
        except BackendError as e:
            log_event("explore_submit_fail", level="error", session_id=session_id, status_code=e.status_code, error=e.message)
            return {"ok": False, "message": e.message or "Failed to create explore post"}

        if body.get("success") is not True:
            log_event("explore_submit_fail", level="error", session_id=session_id, error="missing success flag")
            return {"ok": False, "message": body.get("message") or "Failed to create explore post"}

        ok = True
        log_event("explore_submit_success", session_id=session_id)
        return {"ok": True, "message": body.get("message") or "Explore post created", "data": body.get("data")}
    finally:
        store.finish_submit(session_id, succeeded=ok)
