from .csv_out import csv_block, describe, format_interval, text_lines, write_csv_block, write_suggestions_json
from .html_ui import build_html, write_html_ui

__all__ = [
    "csv_block",
    "describe",
    "format_interval",
    "text_lines",
    "write_csv_block",
    "write_suggestions_json",
    "build_html",
    "write_html_ui",
]
