"""Pydantic contracts shared by the scoring services and the API."""

from models.schemas.job_template import JobTemplate
from models.schemas.match_result import MatchResult
from models.schemas.resume_profile import ResumeProfile

__all__ = [
    "JobTemplate",
    "MatchResult",
    "ResumeProfile",
]
