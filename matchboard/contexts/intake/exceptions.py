"""Custom exceptions for the intake context with payload references."""

from pathlib import Path
from typing import Optional


class IntakeError(Exception):
    """Base class for errors raised while loading resume or score payloads."""


class ResumeNotFoundError(IntakeError):
    """
    Exception raised when no resume profile exists for an identifier.

    Attributes:
        resume_id: Identifier that was requested
        path: Location where the profile payload was expected
    """

    def __init__(self, resume_id: str, path: Optional[Path] = None):
        self.resume_id = resume_id
        self.path = path

        message = f"Resume '{resume_id}' not found"
        if path:
            message += f"\nExpected payload at: {path}"

        super().__init__(message)


class InvalidPayloadError(IntakeError, ValueError):
    """
    Exception raised when a resume or score payload is malformed.

    Attributes:
        message: Error description
        field: Payload field that failed validation
        payload_path: File the payload was read from
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        payload_path: Optional[Path] = None,
    ):
        self.message = message
        self.field = field
        self.payload_path = payload_path

        parts = [message]
        if field:
            parts.append(f"Field: {field}")
        if payload_path:
            parts.append(f"Payload: {payload_path}")

        super().__init__("\n".join(parts))
