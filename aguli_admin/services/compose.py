# Copyright (c) 2026 Mohammed Hassan. All rights reserved.
# Proprietary and confidential. Unauthorized copying, modification, distribution, or use is prohibited.

import threading
import time
import uuid
from dataclasses import dataclass, field
from aguli_admin.config import settings
from aguli_admin.logging_setup import log_event
from .image_set import ComposeState, Event, ImageSet, reduce

class SubmitInProgress(Exception):
    pass

@dataclass
class SubmitSnapshot:
    title: str
    description: str
    status: str
    images: ImageSet

@dataclass
class ComposeSession:
    """One Explore compose form. Owned by a single browser form, never shared."""
    id: str
    capacity: int
    title: str = ""
    description: str = ""
    status: str = "active"
    state: ComposeState = None
    submitting: bool = False
    touched_at: float = field(default_factory=time.monotonic)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self):
        if self.state is None:
            self.state = ComposeState(images=ImageSet(capacity=self.capacity))

    def reset(self):
        self.title = ""
        self.description = ""
        self.status = "active"
        self.state = ComposeState(images=ImageSet(capacity=self.capacity))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "images": [
                {"id": img.id, "index": i, "filename": img.filename, "content_type": img.content_type, "size": len(img.data)}
                for i, img in enumerate(self.state.images)
            ],
            "capacity": self.capacity,
            "dragging": self.state.source_index,
            "submitting": self.submitting,
        }

class ComposeStore:
    """
    In-process registry of compose sessions.

    Every mutation of a session happens under that session's lock, so at
    most one event handler touches a given form at a time.
    """
    def __init__(self, capacity: int = 5, ttl: float = 3600):
        self.capacity = capacity
        self.ttl = ttl
        self._sessions: dict[str, ComposeSession] = {}
        self._lock = threading.Lock()

    def create(self) -> ComposeSession:
        session = ComposeSession(id=uuid.uuid4().hex, capacity=self.capacity)
        with self._lock:
            self._expire_locked()
            self._sessions[session.id] = session
        log_event("compose_session_created", session_id=session.id)
        return session

    def get(self, session_id: str) -> ComposeSession:
        now = time.monotonic()
        with self._lock:
            session = self._sessions[session_id]
            stale = not session.submitting and now - session.touched_at > self.ttl
            if stale:
                del self._sessions[session_id]
            else:
                session.touched_at = now
        if stale:
            log_event("compose_session_expired", session_id=session_id)
            raise KeyError(session_id)
        return session

    def discard(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def dispatch(self, session_id: str, event: Event) -> ComposeSession:
        session = self.get(session_id)
        with session.lock:
            session.state = reduce(session.state, event)
        return session

    def update_fields(self, session_id: str, **fields) -> ComposeSession:
        session = self.get(session_id)
        with session.lock:
            for key in ("title", "description", "status"):
                if fields.get(key) is not None:
                    setattr(session, key, fields[key])
        return session

    def begin_submit(self, session_id: str) -> SubmitSnapshot:
        session = self.get(session_id)
        with session.lock:
            if session.submitting:
                raise SubmitInProgress(session_id)
            session.submitting = True
            return SubmitSnapshot(session.title, session.description, session.status, session.state.images)

    def finish_submit(self, session_id: str, succeeded: bool):
        try:
            session = self.get(session_id)
        except KeyError:
            # discarded while the request was in flight
            return
        with session.lock:
            session.submitting = False
            if succeeded:
                session.reset()

    def _expire_locked(self):
        cutoff = time.monotonic() - self.ttl
        stale = [sid for sid, s in self._sessions.items() if s.touched_at < cutoff and not s.submitting]
        for sid in stale:
            del self._sessions[sid]
        if stale:
            log_event("compose_sessions_expired", count=len(stale))

    def __len__(self):
        with self._lock:
            return len(self._sessions)

compose_store = ComposeStore(capacity=settings.max_explore_images, ttl=settings.compose_session_ttl)
