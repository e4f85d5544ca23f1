"""Scorer output: how well a candidate's skills fit one job template."""

from pydantic import BaseModel


class MatchResult(BaseModel):
    """A scored job template. Recomputed on every scoring call."""
    title: str
    company: str
    location: str = ""
    required_skills: list[str] = []
    match_percentage: int = 0  # 0-100
    description: str = ""
    matched_skills: list[str] = []  # job casing, required_skills order
    domain_gate_applied: bool = False
