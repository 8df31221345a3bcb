"""Report writing exports."""

from .report_writer import dump_report, write_report

__all__ = [
    "dump_report",
    "write_report",
]
