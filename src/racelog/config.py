"""
Application Configuration

Settings for a single racelog CLI run.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class AppConfig:
    """Configuration for one CLI run."""
    
    # Session input (prompted for when None)
    driver_name: Optional[str] = None
    track_name: Optional[str] = None
    vehicle_choice: Optional[int] = None
    
    # Lap synthesis
    seed: Optional[int] = None
    
    # Report
    output: Path = Path("report.txt")
    
    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    
    def __post_init__(self):
        """Validate and normalize configuration."""
        if isinstance(self.output, str):
            self.output = Path(self.output)
        if self.log_file and isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)
        self.log_level = self.log_level.upper()
