import logging
import threading
import time
from typing import Callable, Dict, Optional, Protocol, Tuple

from voiceform.models import Session
from voiceform.settings import SESSION_TTL_SECONDS

log = logging.getLogger(__name__)


class SessionStore(Protocol):
    def get(self, session_id: str) -> Optional[Session]: ...
    def put(self, session: Session) -> None: ...
    def delete(self, session_id: str) -> None: ...


class InMemorySessionStore(SessionStore):
    """
    Process-local session map with idle expiry.

    Each entry lives `ttl_seconds` past its last put/get; ttl <= 0 disables
    expiry. The lock only protects the map itself. Two requests updating the
    same session are not serialized: whichever put lands last wins.
    """
    def __init__(self, ttl_seconds: int = SESSION_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._items: Dict[str, Tuple[Session, float]] = {}
        self._lock = threading.Lock()

    def _deadline(self) -> float:
        if self.ttl_seconds <= 0:
            return float("inf")
        return self._clock() + self.ttl_seconds

    def get(self, session_id: str) -> Optional[Session]:
        with self._lock:
            item = self._items.get(session_id)
            if item is None:
                return None
            session, expires_at = item
            if expires_at <= self._clock():
                del self._items[session_id]
                log.info("session expired: %s", session_id)
                return None
            # sliding expiry
            self._items[session_id] = (session, self._deadline())
            return session

    def put(self, session: Session) -> None:
        with self._lock:
            self._purge_locked()
            self._items[session.session_id] = (session, self._deadline())

    def delete(self, session_id: str) -> None:
        with self._lock:
            self._items.pop(session_id, None)

    def purge_expired(self) -> int:
        """Drop every expired entry; returns how many were removed."""
        with self._lock:
            return self._purge_locked()

    def _purge_locked(self) -> int:
        now = self._clock()
        dead = [sid for sid, (_, exp) in self._items.items() if exp <= now]
        for sid in dead:
            del self._items[sid]
        if dead:
            log.info("evicted %d expired session(s)", len(dead))
        return len(dead)

    def __len__(self) -> int:
        return len(self._items)


# Process-wide instance used by the API
_store = InMemorySessionStore()

def get_store() -> SessionStore:
    """FastAPI dependency; tests override it with a fresh store."""
    return _store
