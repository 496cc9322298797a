from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class JobPreferences(BaseModel):
    """Roles an applicant wants to be considered for."""

    desired_roles: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class ApplicantRecord(BaseModel):
    """Stored applicant document."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    skills: list[str] = Field(default_factory=list)
    job_preferences: JobPreferences = Field(default_factory=JobPreferences)
    submitted_at: str | None = None

    model_config = ConfigDict(extra="allow")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def desired_roles(self) -> list[str]:
        return self.job_preferences.desired_roles


class ScanRequest(BaseModel):
    """Skill scan input. Identity fields are only used for duplicate detection."""

    skills: list[str] = Field(default_factory=list)
    job_preferences: JobPreferences = Field(default_factory=JobPreferences)
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    model_config = ConfigDict(extra="allow")

    @property
    def desired_roles(self) -> list[str]:
        return self.job_preferences.desired_roles

    @property
    def has_identity(self) -> bool:
        return bool(self.email and self.first_name and self.last_name)
