from pydantic import BaseModel

from models.schemas.job_template import JobTemplate
from models.schemas.match_result import MatchResult
from models.schemas.resume_profile import ResumeProfile


class SkillsResponse(BaseModel):
    skills: list[str] = []


class JobMatchResponse(BaseModel):
    matches: list[MatchResult] = []
    summary: str = ""


class CatalogResponse(BaseModel):
    jobs: list[JobTemplate] = []


class InterviewQuestionsResponse(BaseModel):
    questions: list[str] = []
    feedback: str = ""


class AnalysisResponse(BaseModel):
    extracted_skills: list[str] = []
    job_matches: list[MatchResult] = []
    analysis: str = ""  # skills + strongest match synopsis
    profile: ResumeProfile = ResumeProfile()
