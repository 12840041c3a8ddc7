from fastapi import APIRouter, Depends, UploadFile, File, Form, HTTPException
from aguli_admin.security.auth import user_backend
from aguli_admin.services.backend import API_PREFIX, BackendClient, BackendError, http_error, multipart_fields
from aguli_admin.services.image_check import is_image_upload
from aguli_admin.logging_setup import log_event

router = APIRouter(prefix="/api/videos", tags=["videos"])

def fetch_videos(client: BackendClient) -> list[dict]:
    return client.get(f"{API_PREFIX}/video/getallvideos").get("videos") or []

def fetch_video(client: BackendClient, video_id: str) -> dict:
    return client.get(f"{API_PREFIX}/video/getvideo/{video_id}").get("data") or {}

def build_video_parts(fields: dict, video: UploadFile | None, thumbnail: UploadFile | None) -> list:
    """
    Multipart parts for a video add/update. An uploaded file wins over the
    matching URL field, which is sent empty.
    """
    fields = dict(fields)
    parts = []
    if video is not None and video.filename:
        if not (video.content_type or "").startswith("video/"):
            raise HTTPException(status_code=400, detail=f"File type '{video.content_type}' is not a video.")
        parts.append(("video", (video.filename, video.file.read(), video.content_type)))
        fields["video_url"] = ""
    if thumbnail is not None and thumbnail.filename:
        data = thumbnail.file.read()
        if not is_image_upload(thumbnail.content_type, data):
            raise HTTPException(status_code=400, detail=f"File type '{thumbnail.content_type}' is not an image.")
        parts.append(("thumbnail", (thumbnail.filename, data, thumbnail.content_type)))
        fields["thumbnail_url"] = ""
    return parts + multipart_fields(fields)

@router.get("")
def list_videos(client: BackendClient = Depends(user_backend)):
    try:
        return fetch_videos(client)
    except BackendError as e:
        raise http_error(e)

@router.get("/{video_id}")
def get_video(video_id: str, client: BackendClient = Depends(user_backend)):
    try:
        video = fetch_video(client, video_id)
    except BackendError as e:
        raise http_error(e)
    if not video:
        raise HTTPException(status_code=404, detail="Video not found")
    return video

@router.post("")
def add_video(
    video_tittle: str = Form(""),
    video_description: str = Form(""),
    video_cat: str = Form(""),
    video_status: str = Form("active"),
    video_url: str = Form(""),
    thumbnail_url: str = Form(""),
    video: UploadFile | None = File(None),
    thumbnail: UploadFile | None = File(None),
    client: BackendClient = Depends(user_backend),
):
    parts = build_video_parts(
        {
            "video_tittle": video_tittle,
            "video_description": video_description,
            "video_cat": video_cat,
            "video_status": video_status,
            "video_url": video_url,
            "thumbnail_url": thumbnail_url,
        },
        video,
        thumbnail,
    )
    try:
        client.post(f"{API_PREFIX}/video/add", files=parts)
    except BackendError as e:
        raise http_error(e)
    log_event("video_add", video_tittle=video_tittle)
    return {"ok": True, "message": "Video uploaded successfully"}

@router.put("/{video_id}")
def update_video(
    video_id: str,
    video_tittle: str = Form(""),
    video_description: str = Form(""),
    video_cat: str = Form(""),
    video_status: str = Form(""),
    video_url: str = Form(""),
    thumbnail_url: str = Form(""),
    video: UploadFile | None = File(None),
    thumbnail: UploadFile | None = File(None),
    client: BackendClient = Depends(user_backend),
):
    parts = build_video_parts(
        {
            "video_tittle": video_tittle,
            "video_description": video_description,
            "video_cat": video_cat,
            "video_status": video_status,
            "video_url": video_url,
            "thumbnail_url": thumbnail_url,
        },
        video,
        thumbnail,
    )
    try:
        client.put(f"{API_PREFIX}/video/update/{video_id}", files=parts)
    except BackendError as e:
        raise http_error(e)
    log_event("video_update", video_id=video_id)
    return {"ok": True, "message": "Video updated successfully", "redirect": "/users/videos-pages"}

@router.delete("/{video_id}")
def delete_video(video_id: str, client: BackendClient = Depends(user_backend)):
    try:
        client.delete(f"{API_PREFIX}/video/delete/{video_id}")
    except BackendError as e:
        raise http_error(e)
    log_event("video_delete", video_id=video_id)
    return {"ok": True, "message": "Video deleted successfully"}
