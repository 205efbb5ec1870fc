"""Session state storage."""

import logging
import threading
from typing import Optional, Protocol

from laptop_helpdesk.exceptions import ValidationError
from laptop_helpdesk.models.state import SessionState

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    """Per-session state storage consumed by the intake workflow.

    Implementations must make ``get`` and ``set`` atomic per key and keep
    state for at least the lifetime of the process.
    """

    def get(self, session_key: str) -> Optional[SessionState]: ...

    def set(self, session_key: str, state: SessionState) -> None: ...


def check_session_key(session_key: str) -> str:
    """Reject missing or blank session keys."""
    if not isinstance(session_key, str) or not session_key.strip():
        raise ValidationError("A non-empty session key is required")
    return session_key


class InMemorySessionStore:
    """Process-local session store.

    SessionState values are frozen, so handing them out without copying is
    safe; a writer always replaces the whole value.
    """

    def __init__(self) -> None:
        self._states: dict[str, SessionState] = {}
        self._lock = threading.Lock()

    def get(self, session_key: str) -> Optional[SessionState]:
        """Get the state for a session, or None if it was never written."""
        check_session_key(session_key)
        with self._lock:
            return self._states.get(session_key)

    def set(self, session_key: str, state: SessionState) -> None:
        """Store the state for a session."""
        check_session_key(session_key)
        if not isinstance(state, SessionState):
            raise TypeError(f"Expected SessionState, got {type(state).__name__}")
        with self._lock:
            self._states[session_key] = state
        logger.debug("Stored state for session %s: stage=%s", session_key, state.stage.value)

    def clear(self) -> None:
        """Drop every session."""
        with self._lock:
            self._states.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)


# Global session store instance
session_store = InMemorySessionStore()
