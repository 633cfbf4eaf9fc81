"""
Report exporter - Fixed-width text report of session averages.

Provides:
- Header and row formatting (Driver / Track / Vehicle / Avg Lap)
- Plain-text export to a report file
"""

from dataclasses import dataclass
from typing import Iterable
from pathlib import Path
import logging

from racelog.session.session import Session
from racelog.scoring.lap_statistics import average_lap

logger = logging.getLogger(__name__)


# Column widths: driver, track, vehicle, average lap
DRIVER_WIDTH = 15
TRACK_WIDTH = 15
VEHICLE_WIDTH = 10
AVG_LAP_WIDTH = 12


@dataclass
class ExporterConfig:
    """Exporter configuration."""
    output_dir: str = "."
    filename: str = "report.txt"


class ReportExporter:
    """Write session reports to text files."""
    
    def __init__(self, config: ExporterConfig | None = None):
        """Initialize exporter.
        
        Args:
            config: Exporter configuration
        """
        self.config = config or ExporterConfig()
        self._output_path = Path(self.config.output_dir)
    
    @staticmethod
    def _format_line(driver: str, track: str, vehicle: str, avg_lap: str) -> str:
        return (
            f"{driver:<{DRIVER_WIDTH}}"
            f"{track:<{TRACK_WIDTH}}"
            f"{vehicle:<{VEHICLE_WIDTH}}"
            f"{avg_lap:<{AVG_LAP_WIDTH}}"
        )
    
    def format_header(self) -> str:
        """Column header line."""
        return self._format_line("Driver", "Track", "Vehicle", "Avg Lap")
    
    def format_row(self, session: Session) -> str:
        """Report line for one session."""
        return self._format_line(
            session.driver_name,
            session.track_name,
            session.vehicle.label,
            f"{average_lap(session):.2f}",
        )
    
    def render(self, sessions: Iterable[Session]) -> str:
        """Render the full report.
        
        Args:
            sessions: Sessions to report, one row each
            
        Returns:
            Report text, every line newline terminated
        """
        lines = [self.format_header()]
        lines.extend(self.format_row(s) for s in sessions)
        return "".join(line + "\n" for line in lines)
    
    def export(
        self,
        sessions: Iterable[Session],
        filename: str | None = None,
    ) -> Path:
        """Write the report to a file.
        
        Args:
            sessions: Sessions to report
            filename: Output filename (defaults to config filename)
            
        Returns:
            Path to exported file
        """
        self._output_path.mkdir(parents=True, exist_ok=True)
        output_file = self._output_path / (filename or self.config.filename)
        
        text = self.render(sessions)
        with open(output_file, 'w') as f:
            f.write(text)
        
        logger.info("Report written to %s", output_file)
        return output_file
