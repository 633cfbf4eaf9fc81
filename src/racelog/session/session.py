"""
Session records - One practice run and the vehicle it was driven in.

Provides:
- VehicleCategory enumeration with menu-number lookup
- Immutable Session record with exactly three lap times
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple


LAPS_PER_SESSION = 3


class UnknownVehicleCategoryError(ValueError):
    """Raised when a vehicle category is outside the known set."""
    
    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown vehicle category: {value!r}")


class VehicleCategory(IntEnum):
    """Vehicle categories offered by the session menu."""
    GT3 = 1
    FORMULA = 2
    RALLY = 3
    
    @property
    def label(self) -> str:
        """Display name used in prompts and reports."""
        return _LABELS[self]
    
    @classmethod
    def from_choice(cls, choice: int) -> "VehicleCategory":
        """Map a menu number (1-3) to a category.
        
        Args:
            choice: Menu number entered by the user
            
        Returns:
            Matching vehicle category
            
        Raises:
            UnknownVehicleCategoryError: If the number has no category
        """
        if isinstance(choice, bool):
            raise UnknownVehicleCategoryError(choice)
        try:
            return cls(choice)
        except ValueError:
            raise UnknownVehicleCategoryError(choice) from None


_LABELS = {
    VehicleCategory.GT3: "GT3",
    VehicleCategory.FORMULA: "Formula",
    VehicleCategory.RALLY: "Rally",
}


@dataclass(frozen=True)
class Session:
    """Record of a single practice session."""
    driver_name: str
    track_name: str
    vehicle: VehicleCategory
    lap_times: Tuple[float, ...]
    
    def __post_init__(self):
        laps = tuple(float(t) for t in self.lap_times)
        if len(laps) != LAPS_PER_SESSION:
            raise ValueError(
                f"A session needs exactly {LAPS_PER_SESSION} lap times, got {len(laps)}"
            )
        vehicle = VehicleCategory.from_choice(self.vehicle)
        # Frozen dataclass, so normalize through object.__setattr__
        object.__setattr__(self, "lap_times", laps)
        object.__setattr__(self, "vehicle", vehicle)
