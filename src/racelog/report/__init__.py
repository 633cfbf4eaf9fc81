"""
Report module - Text reports of recorded sessions.

This module contains:
- ReportExporter: Fixed-width report writer
"""

from racelog.report.exporter import ExporterConfig, ReportExporter

__all__ = [
    "ExporterConfig",
    "ReportExporter",
]
