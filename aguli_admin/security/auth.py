from datetime import datetime, timedelta, timezone as dt_timezone
import jwt
from fastapi import Request, HTTPException, Depends, status
from pydantic import BaseModel
from aguli_admin.config import settings

ALGORITHM = "HS256"
COOKIE_NAME = "access_token"

class AdminUser(BaseModel):
    id: str
    email: str | None = None
    name: str | None = None
    picture: str | None = None
    # token issued by the Aguli TV backend, forwarded as Bearer
    backend_token: str | None = None

def decode_google_credential(credential: str) -> dict:
    """
    Read the claims of a Google Identity Services ID token.

    The signature is not checked here; the backend performs its own sign-in.
    """
    try:
        return jwt.decode(credential, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        raise ValueError(f"Malformed Google credential: {e}") from e

def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(dt_timezone.utc) + expires_delta
    else:
        expire = datetime.now(dt_timezone.utc) + timedelta(days=settings.session_days)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)

def get_current_user(request: Request) -> AdminUser | None:
    token = request.cookies.get(COOKIE_NAME)
    if not token:
        auth_header = request.headers.get("Authorization")
        if auth_header and auth_header.startswith("Bearer "):
            token = auth_header.split("Bearer ")[1]
    if not token:
        return None

    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except jwt.PyJWTError:
        return None

    user_id = payload.get("sub")
    if user_id is None:
        return None
    return AdminUser(
        id=str(user_id),
        email=payload.get("email"),
        name=payload.get("name"),
        picture=payload.get("picture"),
        backend_token=payload.get("backend_token"),
    )

def require_user(user: AdminUser | None = Depends(get_current_user)) -> AdminUser:
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user

def optional_user(user: AdminUser | None = Depends(get_current_user)) -> AdminUser | None:
    return user

def user_backend(user: AdminUser = Depends(require_user)):
    """Backend client acting with the signed-in admin's token."""
    from aguli_admin.services.backend import get_backend
    return get_backend(user.backend_token)
