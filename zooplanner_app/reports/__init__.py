"""
Reporting utilities (text and payloads) for zooplanner.
"""

from zooplanner_app.reports.simple_text_report import (
    build_analysis_payload,
    build_analysis_summary_text,
    build_explanation_text,
    format_viable_enclosure,
)

__all__ = [
    "build_analysis_payload",
    "build_analysis_summary_text",
    "build_explanation_text",
    "format_viable_enclosure",
]
