from fastapi import APIRouter, Depends, UploadFile, File, Form, HTTPException
from aguli_admin.security.auth import user_backend
from aguli_admin.services.backend import API_PREFIX, BackendClient, BackendError, http_error, multipart_fields
from aguli_admin.services.listing import sort_ads
from aguli_admin.logging_setup import log_event

router = APIRouter(prefix="/api/ads", tags=["ads"])

AD_FIELDS = ("ads_name", "ads_type", "ads_screen", "ads_link", "ads_status", "ads_sequence")

def fetch_ads(client: BackendClient) -> list[dict]:
    body = client.get(f"{API_PREFIX}/ads/getall")
    return sort_ads(body.get("data") or [])

def merge_ad_update(form: dict, current: dict) -> dict:
    """Fields left blank (or a zero sequence) keep the ad's current value."""
    merged = {}
    for key in AD_FIELDS:
        value = form.get(key)
        if isinstance(value, str):
            value = value.strip()
        merged[key] = str(value if value not in (None, "", 0) else current.get(key, ""))
    return merged

def _image_part(image: UploadFile | None) -> list:
    if image is None or not image.filename:
        return []
    return [("ads_image", (image.filename, image.file.read(), image.content_type))]

@router.get("")
def list_ads(client: BackendClient = Depends(user_backend)):
    try:
        return fetch_ads(client)
    except BackendError as e:
        raise http_error(e)

@router.post("")
def add_ad(
    ads_name: str = Form(""),
    ads_type: str = Form(""),
    ads_screen: str = Form(""),
    ads_link: str = Form(""),
    ads_status: str = Form("active"),
    ads_sequence: int = Form(0),
    ads_image: UploadFile | None = File(None),
    client: BackendClient = Depends(user_backend),
):
    form = {
        "ads_name": ads_name,
        "ads_type": ads_type,
        "ads_screen": ads_screen,
        "ads_link": ads_link,
        "ads_status": ads_status,
        "ads_sequence": str(ads_sequence),
    }
    data = {k: v for k, v in form.items() if v != ""}
    try:
        client.post(f"{API_PREFIX}/ads/add", files=multipart_fields(data) + _image_part(ads_image))
    except BackendError as e:
        raise http_error(e)
    log_event("ad_add", ads_name=ads_name)
    return {"ok": True, "message": "Ad added successfully"}

@router.put("/{ad_id}")
def update_ad(
    ad_id: str,
    ads_name: str = Form(""),
    ads_type: str = Form(""),
    ads_screen: str = Form(""),
    ads_link: str = Form(""),
    ads_status: str = Form(""),
    ads_sequence: int = Form(0),
    ads_image: UploadFile | None = File(None),
    client: BackendClient = Depends(user_backend),
):
    try:
        current = next((ad for ad in fetch_ads(client) if ad.get("_id") == ad_id), None)
    except BackendError as e:
        raise http_error(e)
    if current is None:
        raise HTTPException(status_code=404, detail="Ad not found")

    data = merge_ad_update(
        {
            "ads_name": ads_name,
            "ads_type": ads_type,
            "ads_screen": ads_screen,
            "ads_link": ads_link,
            "ads_status": ads_status,
            "ads_sequence": ads_sequence,
        },
        current,
    )
    try:
        client.put(f"{API_PREFIX}/ads/update/{ad_id}", files=multipart_fields(data) + _image_part(ads_image))
    except BackendError as e:
        raise http_error(e)
    log_event("ad_update", ad_id=ad_id)
    return {"ok": True, "message": "Ad updated successfully"}

@router.delete("/{ad_id}")
def delete_ad(ad_id: str, client: BackendClient = Depends(user_backend)):
    try:
        client.delete(f"{API_PREFIX}/ads/delete/{ad_id}")
    except BackendError as e:
        raise http_error(e)
    log_event("ad_delete", ad_id=ad_id)
    return {"ok": True, "message": "Ad deleted successfully"}
