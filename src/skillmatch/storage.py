"""JSON-lines applicant storage and JSON export."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

import pendulum
import structlog
from pydantic import ValidationError

from .schemas import ApplicantRecord

DEFAULT_STORE_PATH = Path("data") / "applicants.jsonl"
DEFAULT_EXPORT_PATH = Path("data") / "student_schema.json"


class StorageError(RuntimeError):
    """Raised when the applicant store cannot be read completely."""

    def __init__(self, errors: list[str]):
        super().__init__("Applicant store is unreadable")
        self.errors = errors

    def __str__(self) -> str:
        return f"Applicant store is unreadable: {self.errors}"


class ApplicantStore:
    """Append-only applicant records, one JSON document per line."""

    def __init__(self, path: str | Path = DEFAULT_STORE_PATH):
        self._path = Path(path)
        self._logger = structlog.get_logger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    def all(self) -> list[ApplicantRecord]:
        if not self._path.exists():
            return []

        records: list[ApplicantRecord] = []
        errors: list[str] = []
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                for idx, line in enumerate(handle, start=1):
                    raw = line.strip()
                    if not raw:
                        continue
                    try:
                        records.append(ApplicantRecord.model_validate_json(raw))
                    except ValidationError as exc:
                        errors.append(f"line {idx}: {exc.errors()[0]['msg']}")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError([str(exc)]) from exc

        if errors:
            raise StorageError(errors)
        return records

    def find_by_role(self, role: str) -> list[ApplicantRecord]:
        return [record for record in self.all() if role in record.desired_roles]

    def populations(self, roles: Iterable[str]) -> dict[str, list[ApplicantRecord]]:
        """Group existing applicants by each requested role from a single read."""
        records = self.all()
        return {
            role: [record for record in records if role in record.desired_roles]
            for role in dict.fromkeys(roles)
        }

    def is_duplicate(self, *, email: str, first_name: str, last_name: str) -> bool:
        wanted = (email.casefold(), first_name.casefold(), last_name.casefold())
        return any(
            (
                record.email.casefold(),
                record.first_name.casefold(),
                record.last_name.casefold(),
            )
            == wanted
            for record in self.all()
        )

    def add(self, record: ApplicantRecord) -> ApplicantRecord:
        stored = record.model_copy(
            update={"submitted_at": pendulum.now("UTC").to_iso8601_string()}
        )
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(stored.model_dump_json())
            handle.write("\n")
        self._logger.info("store.added", email=stored.email, path=str(self._path))
        return stored


class ExportWriter:
    """Persist arbitrary JSON payloads."""

    def write(self, path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
