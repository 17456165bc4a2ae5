"""JSON export of dashboard views."""

import json
from pathlib import Path

from matchboard.contexts.analytics.dashboard import DashboardView
from matchboard.contexts.reporting.logger import _log_success


def dashboard_to_json(view: DashboardView) -> str:
    return json.dumps(view.to_dict(), indent=2, ensure_ascii=False)


def export_dashboard_json(view: DashboardView, output_path: Path) -> Path:
    """
    Write a dashboard view to a JSON file, creating parent directories.

    Returns:
        Path written
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dashboard_to_json(view) + "\n", encoding="utf-8")
    _log_success(f"Wrote dashboard for resume {view.resume_id} to {output_path}")
    return output_path
