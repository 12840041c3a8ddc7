import math
from datetime import datetime
import pytz
from aguli_admin.config import settings

STATUS_FILTERS = ("all", "active", "inactive")

def filter_explore_posts(posts: list[dict], search: str = "", status: str = "all") -> list[dict]:
    """Case-insensitive title search, then status filter ('all' keeps everything)."""
    term = (search or "").lower()
    out = [p for p in posts if term in (p.get("explore_title") or "").lower()]
    if status and status != "all":
        out = [p for p in out if p.get("explore_status") == status]
    return out

def paginate(items: list, page: int, per_page: int) -> dict:
    total_pages = max(1, math.ceil(len(items) / per_page)) if per_page > 0 else 1
    page = max(1, min(page, total_pages))
    start = (page - 1) * per_page
    return {
        "items": items[start:start + per_page],
        "page": page,
        "total_pages": total_pages,
        "total": len(items),
    }

def sort_ads(ads: list[dict]) -> list[dict]:
    return sorted(ads, key=lambda ad: _as_number(ad.get("ads_sequence")))

def _as_number(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0

def format_timestamp(value: str | None, tz_name: str | None = None) -> str:
    """Render a backend ISO timestamp in the dashboard's timezone; unparseable values pass through."""
    if not value:
        return ""
    if not isinstance(value, str):
        return str(value)
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(pytz.timezone(tz_name or settings.timezone)).strftime("%d %b %Y, %H:%M")
