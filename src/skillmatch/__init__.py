"""Skill-based applicant matching and admission decisions."""

__version__ = "0.1.0"
