"""Pydantic schema definitions for applicant records and scan requests."""

from __future__ import annotations

from .applicant import ApplicantRecord, JobPreferences, ScanRequest

__all__ = [
    "ApplicantRecord",
    "JobPreferences",
    "ScanRequest",
]
