"""Skill scan and submission workflow around the qualification core."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import pendulum
import structlog

from . import __version__
from .core import MatchedApplicant, QualificationEvaluator, RoleAnalysisResult
from .core.scoring import RoleWeights
from .schemas import ApplicantRecord, ScanRequest
from .storage import DEFAULT_EXPORT_PATH, ApplicantStore, ExportWriter, StorageError

QUALIFIED_MESSAGE = (
    "Congratulations! You qualify for at least one desired role. "
    "Data is ready for submission."
)
NOT_QUALIFIED_MESSAGE = (
    "You do not meet the qualifications for any desired role. "
    "Please review the criteria."
)
DUPLICATE_SCAN_MESSAGE = (
    "User with this email, first name, and last name already exists in the database. "
    "Cannot proceed with scan."
)
DUPLICATE_SUBMIT_MESSAGE = (
    "User with this email, first name, and last name already exists in the database. "
    "Cannot submit."
)
SCAN_FAILED_MESSAGE = "Error scanning skills"
SUBMIT_FAILED_MESSAGE = "Error saving applicant data"
SUBMITTED_MESSAGE = "Applicant data saved successfully."


@dataclass(slots=True)
class ScanResponse:
    """Scan outcome returned to the caller."""

    can_submit: bool
    message: str
    role_analysis: list[RoleAnalysisResult] = field(default_factory=list)
    matched_user: MatchedApplicant | None = None
    is_duplicate: bool = False
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "can_submit": self.can_submit,
            "message": self.message,
        }
        if self.is_duplicate:
            payload["is_duplicate"] = True
            return payload
        if self.error is not None:
            payload["error"] = self.error
            return payload
        payload["role_analysis"] = [result.to_dict() for result in self.role_analysis]
        payload["matched_user"] = (
            {
                "name": self.matched_user.name,
                "email": self.matched_user.email,
                "skills": list(self.matched_user.skills),
            }
            if self.matched_user
            else None
        )
        return payload


@dataclass(slots=True)
class SubmitResponse:
    ok: bool
    message: str
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"ok": self.ok, "message": self.message}
        if self.error is not None:
            payload["error"] = self.error
        return payload


class MatchingService:
    """Owns the I/O around a skill scan: duplicate check, population fetch, response."""

    def __init__(
        self,
        *,
        evaluator: QualificationEvaluator,
        store: ApplicantStore,
        role_weights: Mapping[str, RoleWeights],
        writer: ExportWriter | None = None,
    ) -> None:
        self._evaluator = evaluator
        self._store = store
        self._role_weights = role_weights
        self._writer = writer or ExportWriter()
        self._logger = structlog.get_logger(__name__)

    def scan(self, request: ScanRequest) -> ScanResponse:
        try:
            if request.has_identity and self._store.is_duplicate(
                email=request.email,
                first_name=request.first_name,
                last_name=request.last_name,
            ):
                self._logger.info("scan.duplicate", email=request.email)
                return ScanResponse(
                    can_submit=False,
                    message=DUPLICATE_SCAN_MESSAGE,
                    is_duplicate=True,
                )
            populations = self._store.populations(request.desired_roles)
        except StorageError as exc:
            self._logger.error("scan.failed", errors=exc.errors)
            return ScanResponse(
                can_submit=False,
                message=SCAN_FAILED_MESSAGE,
                error=str(exc),
            )

        verdict = self._evaluator.evaluate(
            skills=request.skills,
            desired_roles=request.desired_roles,
            role_weights=self._role_weights,
            resolve_population=populations.__getitem__,
        )

        self._logger.info(
            "scan.result",
            roles=request.desired_roles,
            can_submit=verdict.can_submit,
            statuses=[result.status.value for result in verdict.role_analysis],
        )

        return ScanResponse(
            can_submit=verdict.can_submit,
            message=QUALIFIED_MESSAGE if verdict.can_submit else NOT_QUALIFIED_MESSAGE,
            role_analysis=verdict.role_analysis,
            matched_user=verdict.matched_user,
        )

    def submit(self, record: ApplicantRecord) -> SubmitResponse:
        try:
            if self._store.is_duplicate(
                email=record.email,
                first_name=record.first_name,
                last_name=record.last_name,
            ):
                self._logger.info("submit.duplicate", email=record.email)
                return SubmitResponse(
                    ok=False,
                    message=DUPLICATE_SUBMIT_MESSAGE,
                    error="Duplicate user",
                )
            self._store.add(record)
        except (StorageError, OSError) as exc:
            self._logger.error("submit.failed", error=str(exc))
            return SubmitResponse(ok=False, message=SUBMIT_FAILED_MESSAGE, error=str(exc))
        return SubmitResponse(ok=True, message=SUBMITTED_MESSAGE)

    def list_applicants(self) -> list[ApplicantRecord]:
        return self._store.all()

    def export(self, payload: Any, path: Path = DEFAULT_EXPORT_PATH) -> Path:
        if payload is None:
            raise ValueError("No JSON data provided to save.")
        self._writer.write(path, payload)
        self._logger.info(
            "export.written",
            path=str(path),
            exported_at=pendulum.now("UTC").to_iso8601_string(),
            app_version=__version__,
        )
        return path
