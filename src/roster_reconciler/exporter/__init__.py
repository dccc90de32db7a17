"""
Exporter package.

Re-exports the JSON export entry points used by the pipeline and the CLI.
"""

from __future__ import annotations

from .json_exporter import dumps_report, export_report_to_json, report_to_dict

__all__ = ["dumps_report", "export_report_to_json", "report_to_dict"]
