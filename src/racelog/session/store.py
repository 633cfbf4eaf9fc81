"""
Session store - Fixed-capacity storage for recorded sessions.

Provides:
- Insertion-ordered session storage
- Capacity check that rejects overflow without side effects
- Iteration for statistics and reporting
"""

import logging
from typing import Iterator, List

from racelog.session.session import Session

logger = logging.getLogger(__name__)


MAX_SESSIONS = 5


class SessionStore:
    """Holds up to MAX_SESSIONS sessions in the order they were added.
    
    There is no removal or indexed lookup; sessions live until the
    store itself is discarded.
    """
    
    def __init__(self):
        """Initialize an empty store."""
        self._sessions: List[Session] = []
    
    @property
    def max_sessions(self) -> int:
        """Maximum number of sessions the store accepts."""
        return MAX_SESSIONS
    
    @property
    def is_full(self) -> bool:
        """Whether further adds will be rejected."""
        return len(self._sessions) >= MAX_SESSIONS
    
    def add(self, session: Session) -> bool:
        """Append a session if there is room.
        
        Args:
            session: Session to store
            
        Returns:
            True if stored, False if the store is already full
        """
        if self.is_full:
            logger.warning(
                "Session store full (%d sessions), rejecting session for %s",
                MAX_SESSIONS, session.driver_name,
            )
            return False
        
        logger.debug(
            "Storing session %d/%d: %s at %s (%s)",
            len(self._sessions) + 1, MAX_SESSIONS,
            session.driver_name, session.track_name, session.vehicle.label,
        )
        self._sessions.append(session)
        return True
    
    def count(self) -> int:
        """Number of stored sessions."""
        return len(self._sessions)
    
    def __len__(self) -> int:
        return len(self._sessions)
    
    def __iter__(self) -> Iterator[Session]:
        return iter(self._sessions)
    
    def get_state(self) -> dict:
        """Get store state.
        
        Returns:
            Dictionary with store state
        """
        return {
            "session_count": len(self._sessions),
            "max_sessions": MAX_SESSIONS,
            "is_full": self.is_full,
            "drivers": [s.driver_name for s in self._sessions],
        }
