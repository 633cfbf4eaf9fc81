"""
Session module - Practice session records and their storage.

This module contains:
- VehicleCategory: GT3 / Formula / Rally
- Session: One recorded run with three lap times
- SessionStore: Fixed-capacity, insertion-ordered session storage
"""

from racelog.session.session import (
    LAPS_PER_SESSION,
    Session,
    UnknownVehicleCategoryError,
    VehicleCategory,
)
from racelog.session.store import MAX_SESSIONS, SessionStore

__all__ = [
    "LAPS_PER_SESSION",
    "MAX_SESSIONS",
    "Session",
    "SessionStore",
    "UnknownVehicleCategoryError",
    "VehicleCategory",
]
