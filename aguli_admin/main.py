import uuid
import logging
from datetime import datetime, timezone
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from .config import settings
from .logging_setup import setup_logging, request_id_var, log_event
from .routes import auth, categories, ads, citizen, explore, livetv, videos, push, pages
from .services.compose import compose_store

logger = logging.getLogger(__name__)

if settings.secret_key == "change-me-in-production-for-jwt":
    logger.warning("STARTUP WARNING: JWT_SECRET is using the default insecure key")
if not settings.google_client_id:
    logger.warning("STARTUP WARNING: GOOGLE_CLIENT_ID is not set; the login page cannot sign anyone in")

app = FastAPI(title="Aguli TV Admin Dashboard")
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

@app.middleware("http")
async def request_context(request: Request, call_next):
    token = request_id_var.set(request.headers.get("X-Request-Id") or uuid.uuid4().hex)
    try:
        return await call_next(request)
    finally:
        request_id_var.reset(token)

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": f"Internal Server Error: {str(exc)}", "type": type(exc).__name__},
    )

app.include_router(auth.router)
app.include_router(categories.router)
app.include_router(ads.router)
app.include_router(citizen.router)
app.include_router(explore.router)
app.include_router(livetv.router)
app.include_router(videos.router)
app.include_router(push.router)
app.include_router(pages.router)

@app.on_event("startup")
def on_startup():
    setup_logging()
    log_event("startup", api_url=settings.api_url, max_explore_images=settings.max_explore_images)

@app.get("/health")
def health():
    return {
        "status": "ok",
        "compose_sessions": len(compose_store),
        "now": datetime.now(timezone.utc).isoformat(),
    }
