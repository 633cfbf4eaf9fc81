"""
Lap statistics - Averages and baseline lap times.

Provides:
- Per-session average lap
- Overall average across every stored lap
- Baseline lap time per vehicle category
"""

from typing import Dict, Iterable
import numpy as np

from racelog.session.session import Session, VehicleCategory


# Nominal lap time in seconds for each category
BASE_LAP_TIMES: Dict[VehicleCategory, float] = {
    VehicleCategory.GT3: 95.0,
    VehicleCategory.FORMULA: 70.0,
    VehicleCategory.RALLY: 120.0,
}


def average_lap(session: Session) -> float:
    """Mean of a session's lap times.
    
    Args:
        session: Session to average
        
    Returns:
        Average lap time in seconds
    """
    return float(np.mean(session.lap_times))


def overall_average(sessions: Iterable[Session]) -> float:
    """Mean of every lap across all sessions.
    
    This averages the individual laps, not the per-session averages.
    
    Args:
        sessions: Session store or any iterable of sessions
        
    Returns:
        Average lap time in seconds, 0.0 if there are no sessions
    """
    laps = [t for session in sessions for t in session.lap_times]
    if not laps:
        return 0.0
    return float(np.mean(laps))


def base_lap_time(category: VehicleCategory) -> float:
    """Baseline lap time for a vehicle category.
    
    Args:
        category: Vehicle category, or its menu number (1-3)
        
    Returns:
        Nominal lap time in seconds
        
    Raises:
        UnknownVehicleCategoryError: If the category is not GT3, Formula or Rally
    """
    return BASE_LAP_TIMES[VehicleCategory.from_choice(category)]
