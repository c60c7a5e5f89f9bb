from .checks import check_duration, check_interval, valid_intervals, validate_roster
from .report import format_validation_report, write_validation_report

__all__ = [
    "check_duration",
    "check_interval",
    "valid_intervals",
    "validate_roster",
    "format_validation_report",
    "write_validation_report",
]
