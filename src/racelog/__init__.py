"""
racelog - Motorsport practice session recorder.

This package provides:
- Session records for GT3, Formula and Rally runs
- A fixed-capacity session store
- Lap time averages and per-category baseline lap times
- Random lap synthesis and a fixed-width text report for the CLI
"""

__version__ = "0.1.0"

from racelog.session import Session, SessionStore, VehicleCategory
from racelog.scoring import average_lap, base_lap_time, overall_average

__all__ = [
    "Session",
    "SessionStore",
    "VehicleCategory",
    "average_lap",
    "base_lap_time",
    "overall_average",
    "__version__",
]
