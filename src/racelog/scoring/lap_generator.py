"""
Lap generator - Synthesizes plausible lap times for a category.

Each lap is the category baseline plus a random offset drawn in
fixed steps (0.00 to 9.99 s by default).
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np

from racelog.session.session import LAPS_PER_SESSION, Session, VehicleCategory
from racelog.scoring.lap_statistics import base_lap_time


@dataclass
class GeneratorConfig:
    """Configuration for lap time synthesis."""
    num_laps: int = LAPS_PER_SESSION
    max_offset_steps: int = 1000  # Offsets drawn from [0, max_offset_steps)
    offset_resolution_s: float = 0.01
    
    # Random seed (None for random)
    seed: int | None = None


class LapTimeGenerator:
    """Random lap time source used by the CLI."""
    
    def __init__(self, config: GeneratorConfig | None = None):
        """Initialize generator.
        
        Args:
            config: Generator configuration
        """
        self.config = config or GeneratorConfig()
        self._rng = np.random.default_rng(self.config.seed)
    
    @property
    def max_offset_s(self) -> float:
        """Largest offset that can be added to the baseline."""
        return (self.config.max_offset_steps - 1) * self.config.offset_resolution_s
    
    def generate(self, category: VehicleCategory) -> Tuple[float, ...]:
        """Generate lap times for a category.
        
        Args:
            category: Vehicle category supplying the baseline
            
        Returns:
            Lap times in seconds
        """
        base = base_lap_time(category)
        steps = self._rng.integers(0, self.config.max_offset_steps, size=self.config.num_laps)
        return tuple(
            round(base + int(step) * self.config.offset_resolution_s, 2)
            for step in steps
        )
    
    def create_session(
        self,
        driver_name: str,
        track_name: str,
        category: VehicleCategory,
    ) -> Session:
        """Build a session with freshly generated laps."""
        return Session(driver_name, track_name, category, self.generate(category))
