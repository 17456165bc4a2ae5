"""
Reporting Context

Responsibilities:
- Renders dashboard views as plain-text reports for the command line
- Serializes dashboard views to JSON files

Owns: Text layout of dashboard panels
Never: Computes analytics or reads payloads
"""

from matchboard.contexts.reporting.dashboard_report import render_dashboard_report
from matchboard.contexts.reporting.export import export_dashboard_json

__all__ = ["render_dashboard_report", "export_dashboard_json"]
