"""Résumé profile: experience and education signals next to the skill set."""

from pydantic import BaseModel


class ResumeProfile(BaseModel):
    experience: list[str] = []  # lines carrying a date range
    education: list[str] = []  # lines mentioning a degree or school
    education_level: str = ""  # phd, masters, bachelors, associate
    experience_years: float = 0.0
    sections: list[str] = []
    summary: str = ""
