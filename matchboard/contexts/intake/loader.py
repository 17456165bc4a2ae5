"""
File-backed data access for resume profiles and score records.

Payloads are stored exactly as the analysis and scoring services return them:

    <data_dir>/resumes/<resume_id>.json   resume analysis object
    <data_dir>/scores/<resume_id>.json    list of score objects
                                          (or {"scores": [...]})

A missing or broken resume profile is an error for the caller. Score data is
optional: any failure to load it is logged and replaced with an empty tuple,
so the analytics context only ever receives valid (possibly empty) input.
"""

import json
import os
from pathlib import Path
from typing import Any, Optional, Tuple

from dotenv import load_dotenv

from matchboard.contexts.intake.data_structures import (
    DashboardSnapshot,
    ResumeProfile,
    ScoreRecord,
)
from matchboard.contexts.intake.exceptions import InvalidPayloadError, ResumeNotFoundError
from matchboard.contexts.intake.logger import _log_debug, log_fetch_failure, log_snapshot_loaded

load_dotenv()
DATA_PATH = Path(os.getenv("MATCHBOARD_DATA_PATH", "data"))

RESUMES_DIRNAME = "resumes"
SCORES_DIRNAME = "scores"


def _payload_path(data_dir: Optional[Path], subdir: str, resume_id: str) -> Path:
    # Identifiers name files directly; refuse anything that would leave the data dir
    if not resume_id or Path(resume_id).name != resume_id or resume_id in (".", ".."):
        raise ResumeNotFoundError(resume_id)
    return Path(data_dir or DATA_PATH) / subdir / f"{resume_id}.json"


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def fetch_resume_profile(resume_id: str, data_dir: Optional[Path] = None) -> ResumeProfile:
    """
    Load the resume profile for an identifier.

    Args:
        resume_id: Resume identifier
        data_dir: Data directory (defaults to MATCHBOARD_DATA_PATH env variable)

    Returns:
        Normalized ResumeProfile

    Raises:
        ResumeNotFoundError: If no profile payload exists for the identifier
        InvalidPayloadError: If the payload is unreadable or malformed
    """
    path = _payload_path(data_dir, RESUMES_DIRNAME, resume_id)
    if not path.exists():
        raise ResumeNotFoundError(resume_id, path)

    try:
        payload = _read_json(path)
    except json.JSONDecodeError as e:
        raise InvalidPayloadError(f"Invalid JSON: {e}", payload_path=path) from e
    except (OSError, ValueError) as e:
        # UnicodeDecodeError, IsADirectoryError, PermissionError
        raise InvalidPayloadError(f"Unreadable payload: {e}", payload_path=path) from e

    try:
        profile = ResumeProfile.from_payload(payload, resume_id=resume_id)
    except InvalidPayloadError as e:
        raise InvalidPayloadError(e.message, field=e.field, payload_path=path) from e

    _log_debug(f"Read resume profile from {path}")
    return profile


def parse_score_payloads(payload: Any) -> Tuple[ScoreRecord, ...]:
    """
    Convert a scores payload (list, or object with a "scores" list) to records.

    Raises:
        InvalidPayloadError: If the payload shape or any record is malformed
    """
    if isinstance(payload, dict):
        payload = payload.get("scores")
    if payload is None:
        return ()
    if not isinstance(payload, list):
        raise InvalidPayloadError(
            f"Scores payload must be a list, got {type(payload).__name__}", field="scores"
        )
    return tuple(ScoreRecord.from_payload(item) for item in payload)


def fetch_score_records(resume_id: str, data_dir: Optional[Path] = None) -> Tuple[ScoreRecord, ...]:
    """
    Load the score records computed for a resume.

    Never raises for data problems: missing files, invalid JSON and malformed
    records are logged and yield an empty tuple.

    Args:
        resume_id: Resume identifier
        data_dir: Data directory (defaults to MATCHBOARD_DATA_PATH env variable)

    Returns:
        Tuple of ScoreRecord (possibly empty)
    """
    try:
        path = _payload_path(data_dir, SCORES_DIRNAME, resume_id)
        records = parse_score_payloads(_read_json(path))
    except (OSError, ValueError, ResumeNotFoundError) as e:
        log_fetch_failure("score records", resume_id, e)
        return ()

    _log_debug(f"Read {len(records)} score records from {path}")
    return records


def load_snapshot(resume_id: str, data_dir: Optional[Path] = None) -> DashboardSnapshot:
    """
    Fetch everything the dashboard needs for one resume.

    Raises:
        ResumeNotFoundError: If the resume profile does not exist
        InvalidPayloadError: If the resume profile is malformed
    """
    profile = fetch_resume_profile(resume_id, data_dir)
    records = fetch_score_records(resume_id, data_dir)
    log_snapshot_loaded(resume_id, len(profile.skills), len(records))
    return DashboardSnapshot.of(profile, records)
