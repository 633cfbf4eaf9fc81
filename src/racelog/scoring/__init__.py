"""
Scoring module - Lap time statistics.

This module contains:
- average_lap / overall_average: Lap time means
- base_lap_time: Nominal lap time per vehicle category
- LapTimeGenerator: Random lap times around the baseline
"""

from racelog.scoring.lap_statistics import (
    BASE_LAP_TIMES,
    average_lap,
    base_lap_time,
    overall_average,
)
from racelog.scoring.lap_generator import GeneratorConfig, LapTimeGenerator

__all__ = [
    "BASE_LAP_TIMES",
    "GeneratorConfig",
    "LapTimeGenerator",
    "average_lap",
    "base_lap_time",
    "overall_average",
]
