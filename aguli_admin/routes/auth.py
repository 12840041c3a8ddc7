from datetime import timedelta
from fastapi import APIRouter, HTTPException, Response, status
from aguli_admin.config import settings
from aguli_admin.schemas import GoogleSignIn
from aguli_admin.security.auth import COOKIE_NAME, create_access_token, decode_google_credential
from aguli_admin.services.backend import API_PREFIX, BackendError, get_backend
from aguli_admin.logging_setup import log_event

router = APIRouter(prefix="/auth", tags=["auth"])

LANDING_PAGE = "/users/videos-pages"

@router.post("/google/signin")
def google_signin(payload: GoogleSignIn, response: Response):
    """Forward a Google ID token's profile to the backend and open a dashboard session."""
    try:
        claims = decode_google_credential(payload.credential)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    user_data = {
        "googleId": claims.get("sub"),
        "email": claims.get("email"),
        "full_name": claims.get("name"),
        "profile_picture": claims.get("picture"),
    }
    try:
        body = get_backend().post(f"{API_PREFIX}/profile/google/signin", json=user_data)
    except BackendError as e:
        log_event("admin_signin_fail", level="warning", email=user_data["email"], error=e.message)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message or "Login failed")

    if body.get("success") is not True:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=body.get("message") or "Login failed")

    profile = body.get("data") or {}
    expires = timedelta(days=settings.session_days)
    access_token = create_access_token(
        data={
            "sub": str(profile.get("_id") or user_data["googleId"]),
            "email": profile.get("email") or user_data["email"],
            "name": profile.get("full_name") or user_data["full_name"],
            "picture": profile.get("profile_picture") or user_data["profile_picture"],
            "backend_token": profile.get("token"),
        },
        expires_delta=expires,
    )
    response.set_cookie(
        key=COOKIE_NAME,
        value=access_token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        max_age=int(expires.total_seconds()),
        path="/",
    )
    log_event("admin_signin", email=user_data["email"])
    return {"ok": True, "redirect": LANDING_PAGE, "user": profile}

@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(COOKIE_NAME, path="/")
    return {"ok": True}
